from patterns.cli import main

raise SystemExit(main())

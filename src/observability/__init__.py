"""パターンサンプルの可観測性（トレース）。"""

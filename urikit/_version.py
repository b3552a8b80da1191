__version__ = (0, 1, 0, None, None)  # 0.1.0

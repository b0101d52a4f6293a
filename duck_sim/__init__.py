"""Duck simulator - ducks composed with swappable quack and fly behaviours"""

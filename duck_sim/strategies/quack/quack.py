"""
Quack behaviour - a real duck quack
"""

class Quack:
    """Plain duck quack"""
    
    def __init__(self):
        self.name = "quack"
        self.description = "Real duck quack"
    
    def quack(self):
        print("Quack")

# Factory function for composition
def create_quack(config=None):
    return Quack()

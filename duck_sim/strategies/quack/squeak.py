"""
Squeak behaviour - rubber duckie squeak
"""

class Squeak:
    """Rubber duckie squeak"""
    
    def __init__(self):
        self.name = "squeak"
        self.description = "Rubber duckie squeak"
    
    def quack(self):
        print("Squeak")

# Factory function for composition
def create_squeak(config=None):
    return Squeak()

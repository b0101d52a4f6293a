"""
Rocket-powered flight - usually swapped in at runtime
"""

class FlyRocketPowered:
    """Flight strapped to a rocket"""
    
    def __init__(self):
        self.name = "fly_rocket_powered"
        self.description = "Fly with a rocket"
    
    def fly(self):
        print("I'm flying with a rocket!")

# Factory function for composition
def create_fly_rocket_powered(config=None):
    return FlyRocketPowered()

"""
Mute quack behaviour - makes no sound at all
"""

class MuteQuack:
    """Silent quack. Only the silence marker is printed."""
    
    def __init__(self):
        self.name = "mute_quack"
        self.description = "Makes no sound"
    
    def quack(self):
        print("<< Silence >>")

# Factory function for composition
def create_mute_quack(config=None):
    return MuteQuack()

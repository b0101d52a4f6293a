"""
Duck simulator - puts a flock through its paces and swaps behaviours mid-run
"""
from typing import Dict, List
from .config_models import Settings, SimulatorConfig, SwapConfig
from .duck import Duck
from .logger import SimulatorLogger
from ..ducks import create_duck
from ..strategies import get_quack_behaviour, get_fly_behaviour


def build_ducks(settings: Settings, logger: SimulatorLogger | None = None) -> Dict[str, Duck]:
    """Create the configured flock, applying per-duck behaviour overrides."""
    ducks = {}
    for duck_cfg in settings.ducks:
        if duck_cfg.id in ducks:
            raise ValueError(f"Duplicate duck id in config: '{duck_cfg.id}'")
        duck = create_duck(duck_cfg.type, duck_id=duck_cfg.id, logger=logger)
        # Overrides are part of construction: checked, but not logged as swaps
        if duck_cfg.quack:
            duck.quack_behaviour = Duck.check_behaviour(
                get_quack_behaviour(duck_cfg.quack), "quack")
        if duck_cfg.fly:
            duck.fly_behaviour = Duck.check_behaviour(
                get_fly_behaviour(duck_cfg.fly), "fly")
        ducks[duck_cfg.id] = duck
    return ducks


class DuckSimulator:
    """Runs every duck through display/quack/fly(/swim) for a number of rounds."""

    def __init__(self,
                 ducks: Dict[str, Duck],
                 config: SimulatorConfig,
                 logger: SimulatorLogger,
                 swaps: List[SwapConfig] | None = None):
        self.ducks = ducks
        self.config = config
        self.logger = logger
        self.swaps_applied = 0
        # Resolved up front so a bad swap fails before anything is printed
        self.pending_swaps = [self._resolve_swap(swap) for swap in swaps or []]

    def _resolve_swap(self, swap: SwapConfig):
        duck = self.ducks.get(swap.duck)
        if duck is None:
            raise ValueError(f"Swap targets unknown duck: '{swap.duck}'")
        if swap.slot == "quack":
            behaviour = get_quack_behaviour(swap.behaviour)
        else:
            behaviour = get_fly_behaviour(swap.behaviour)
        return duck, swap.slot, Duck.check_behaviour(behaviour, swap.slot)

    def run_round(self, round_number: int):
        self.logger.log(f"--- Round {round_number} ---", "info")
        for duck in self.ducks.values():
            self.logger.log(f"{duck!r}", "debug")
            duck.display()
            duck.perform_quack()
            duck.perform_fly()
            if self.config.swim:
                duck.swim()

    def apply_swaps(self):
        """Apply the resolved behaviour swaps through the ducks' setters."""
        for duck, slot, behaviour in self.pending_swaps:
            if slot == "quack":
                duck.set_quack_behaviour(behaviour)
            else:
                duck.set_fly_behaviour(behaviour)
            self.swaps_applied += 1
        self.pending_swaps = []

    def run(self) -> dict:
        """Run all rounds and return (and log) a summary."""
        self.logger.log(f"Starting simulation with {len(self.ducks)} duck(s)", "info")
        self.logger.log_flock(self.ducks.values(), "FLOCK")

        for round_number in range(1, self.config.rounds + 1):
            self.run_round(round_number)
            if round_number == 1 and self.pending_swaps:
                self.apply_swaps()

        summary = {
            "Ducks": len(self.ducks),
            "Rounds": self.config.rounds,
            "Swaps applied": self.swaps_applied,
        }
        self.logger.log_summary(summary, self.ducks.values())
        return summary

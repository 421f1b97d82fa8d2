from .resolver import CombatMode, CombatOutcome, direct_charge, duel, opportunistic_strike

__all__ = ["CombatMode", "CombatOutcome", "direct_charge", "duel", "opportunistic_strike"]

from .pursuit import PursuitPlanner, plan_step

__all__ = ["PursuitPlanner", "plan_step"]

from . import members_controller, tasks_controller

__all__ = ["members_controller", "tasks_controller"]

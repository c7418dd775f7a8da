from lispy.builtin.env_builtin import BUILTINS, build_environment, register

__all__ = ("BUILTINS", "build_environment", "register")

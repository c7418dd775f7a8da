from lispy.evaluation.evaluator import apply_function, evaluate, evaluate_sexpr

__all__ = ("apply_function", "evaluate", "evaluate_sexpr")

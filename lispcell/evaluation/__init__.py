from lispcell.evaluation.evaluator import evaluate

__all__ = ["evaluate"]

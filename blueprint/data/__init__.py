from blueprint.data.questions import BENCHMARKS, get_question_bank

__all__ = ["BENCHMARKS", "get_question_bank"]

from eta.types.symbol import Symbol
from eta.types.environment import Environment
from eta.types.lambda_fn import Lambda
from eta.types.builtin import Builtin

__all__ = ["Symbol", "Environment", "Lambda", "Builtin"]

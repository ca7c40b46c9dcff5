from timeit import timeit

from lispcell.interpreter import Interpreter
from lispcell.types.symbol import Symbol
from lispcell.types.environment import Environment
from lispcell.reader.parser import read


def _parse_one(code: str):
    return read(code).expr


def time_interpreter(code: str, rounds: int, setup: str = "") -> float:
    """Time evaluation only: `setup` and the parse happen once up front."""
    itp = Interpreter(prelude=setup or None)
    expr = _parse_one(code)
    # Warmup
    itp.eval_expr(expr)
    return timeit(lambda: itp.eval_expr(expr), number=rounds)


# Environment lookup chain (no evaluation involved)

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42)
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "((lambda (x y) (+ x y)) 1 2)"

FACT_SETUP = "(define fact (lambda (n acc) (if (<= n 1) acc (fact (- n 1) (* n acc)))))"
FACT_CODE = "(fact 20 1)"

SUM_SETUP = "(define sum_n (lambda (n acc) (if (<= n 0) acc (sum_n (- n 1) (+ acc n)))))"
SUM_CODE = "(sum_n 500 0)"

FLAT_ARITH_CODE = "(+ 1 2 3 4 5 6 7 8 9 10 11 12 13 14 15 16)"


def _print_one(name: str, code: str, rounds: int, setup: str = "") -> None:
    t = time_interpreter(code, rounds, setup)
    print(f"Benchmark: {name}")
    print(f"  interpreter: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print_one("lambda application", LAMBDA_APPLY_CODE, rounds=20000)
    _print_one("recursive factorial", FACT_CODE, rounds=2000, setup=FACT_SETUP)
    _print_one("arithmetic sum 1..500 (recursive)", SUM_CODE, rounds=200, setup=SUM_SETUP)
    _print_one("flat 16-operand addition", FLAT_ARITH_CODE, rounds=20000)

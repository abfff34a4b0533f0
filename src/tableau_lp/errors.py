class TableauLPError(Exception):
    """Base class for errors raised by tableau_lp."""


class SimplexError(TableauLPError, RuntimeError):
    """The simplex iteration stopped without reaching an optimal tableau."""


class UnboundedError(SimplexError):
    def __init__(self, column: str):
        super().__init__(f"Unbounded LP: no positive entry under entering column {column}.")
        self.column = column


class NonConvergenceError(SimplexError):
    def __init__(self, max_iterations: int):
        super().__init__(f"Simplex did not converge within {max_iterations} iterations.")
        self.max_iterations = max_iterations


class SingularSystemError(TableauLPError, ValueError):
    """The linear system has no unique solution."""

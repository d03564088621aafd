

class AlgebraicNumberError(Exception):
    def __init__(self, msg=None):
        if msg:
            self.message = msg
        else:
            self.message = None
        super().__init__(msg)

    def __str__(self):
        return '{0}: {1}'.format(type(self).__name__, self.message)

class InvalidPolynomialError(AlgebraicNumberError):
    pass

class NotSquareFreeError(AlgebraicNumberError):
    pass

class InvalidIntervalError(AlgebraicNumberError):
    pass

class NoRootInIntervalError(InvalidIntervalError):
    pass

class DegreeError(AlgebraicNumberError):
    pass

class IterationError(AlgebraicNumberError):
    pass

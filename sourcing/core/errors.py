"""匹配与分配相关的异常"""


class MatchingError(Exception):
    """匹配核心异常基类"""
    message = "Matching failed"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class NoSuitableSuppliers(MatchingError):
    message = "No suitable suppliers found"


class SupplierNotSelected(MatchingError):
    message = "Please select a supplier"


class IneligibleSupplier(MatchingError):
    message = "Supplier is not a verified supplier"


class QuoteNotFound(MatchingError):
    message = "Quote not found"


class QuoteAlreadyAssigned(MatchingError):
    message = "Quote has already been assigned to a supplier"


class AssignmentWriteError(MatchingError):
    message = "Failed to assign supplier"


class SupplierLoadError(MatchingError):
    message = "Failed to load suppliers"

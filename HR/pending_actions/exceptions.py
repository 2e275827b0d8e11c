class PendingActionsUnavailable(Exception):
    """
    Raised when the feed cannot be assembled because a source read failed.

    The failing collector's category is kept for logging; the original
    database error is chained as __cause__.
    """

    def __init__(self, category, message="Could not load pending actions"):
        self.category = category
        super().__init__(message)

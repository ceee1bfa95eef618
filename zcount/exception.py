class LimitParseError(ValueError):
    def __init__(self, token):
        super().__init__()
        self.token = token

    def __str__(self):
        return f"'{self.token}' is not a non-negative integer"

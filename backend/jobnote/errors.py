class ValidationError(ValueError):
    """A new record is missing a required field.

    ``errors`` maps each offending field to a message the form can show next
    to it.
    """

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(errors.values()))

class MissingEventError(ValueError):
    """
    Raised when a play has no row tagged with an event needed to bound the
    live-action window (e.g. no 'line_set', or no tackle/touchdown/out_of_bounds).
    """

    def __init__(self, missing, play_key=None):
        self.missing = tuple(missing)
        self.play_key = play_key
        where = f" in play {play_key}" if play_key is not None else ""
        super().__init__(f"No frame tagged with {' / '.join(self.missing)}{where}")


class MalformedKeyError(ValueError):
    """
    Raised when player rows cannot be grouped or merged because a key
    column (team, player id, per-play metadata) is missing or inconsistent.
    """

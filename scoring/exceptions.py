from typing import List


class ScoringError(Exception):
    """Base for all scoring errors."""


class MissingReferenceError(ScoringError):
    """A score references a player, hole, or course that does not exist."""

    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind.capitalize()} {entity_id} not found")


class ScoreValidationError(ScoringError):
    """One or more scores in a batch are outside the legal range."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Score validation failed: " + "; ".join(self.errors))

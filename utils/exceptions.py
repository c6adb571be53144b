"""
Error kinds raised by the fitness tracking core
"""


class FitnessTrackerError(Exception):
    """Base class for every error surfaced by the core"""


class NotInitialized(FitnessTrackerError):
    """The store was used before the database was set up"""


class ValidationError(FitnessTrackerError):
    """A required field is missing or holds an invalid value"""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class NotFoundError(FitnessTrackerError):
    """A referenced row (user, food item) does not exist"""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ConstraintViolation(FitnessTrackerError):
    """A uniqueness constraint was breached outside an upsert path"""

"""Entity base."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic entity.

    Services never mutate entities in place; they build the next version with
    ``model_copy(update=...)`` and hand it to the repository.
    """

    model_config = ConfigDict(frozen=True)

from pydantic import BaseModel, ConfigDict


class GitLabModel(BaseModel):
    """Base for all SDK models.

    Unknown keys from newer GitLab versions are ignored. Fields that carry
    a wire alias can be populated by either name and always serialize under
    the wire key.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, serialize_by_alias=True)

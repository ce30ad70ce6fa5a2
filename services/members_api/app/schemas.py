from pydantic import BaseModel, ConfigDict, Field
from typing import List

# Schemas for the members listing

class Member(BaseModel):
    grade: str = ""
    name: str = ""
    name_en: str = ""
    bio: str = ""
    img_path: str = ""


class MembersResponse(BaseModel):
    members: List[Member] = []

# Schemas shared by every endpoint

class ErrorResponse(BaseModel):
    error: str = Field(alias="Error")

    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    status: str = Field(default="OK", alias="Status")

    model_config = ConfigDict(populate_by_name=True)

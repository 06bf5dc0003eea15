from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    status: str = Field()

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"status": "healthy"}
            ]
        }
    }

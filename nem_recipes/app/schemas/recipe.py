from pydantic import BaseModel, ConfigDict


class RecipeRecord(BaseModel):
    id: int
    ag1_speed: int
    mix_time: int
    # serialized as a float, so 45.0 stays "45.0" on the wire
    temp_sp: float

    model_config = ConfigDict(frozen=True)

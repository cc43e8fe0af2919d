from pydantic import BaseModel

class SystemStats(BaseModel):
    users: int
    boards: int
    scraps: int

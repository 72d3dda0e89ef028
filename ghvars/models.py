from datetime import datetime

from pydantic import BaseModel, ConfigDict, TypeAdapter


class ActionsVariable(BaseModel):
    """A configuration variable, scoped to a repository or one of its environments"""

    model_config = ConfigDict(extra="ignore")

    name: str
    value: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ActionsVariableList(BaseModel):
    """Variables in the order returned by the server. total_count is the number available
    on the server, which exceeds len(variables) unless every page was fetched"""

    model_config = ConfigDict(extra="ignore")

    total_count: int
    variables: list[ActionsVariable]


ACTIONS_VARIABLE_ADAPTER = TypeAdapter(ActionsVariable)
ACTIONS_VARIABLE_LIST_ADAPTER = TypeAdapter(ActionsVariableList)

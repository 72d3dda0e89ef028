"""Methods for the Actions Variables API

See https://docs.github.com/en/rest/actions/variables
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional
from urllib.parse import quote

from ghvars.models import (
    ACTIONS_VARIABLE_ADAPTER,
    ACTIONS_VARIABLE_LIST_ADAPTER,
    ActionsVariable,
    ActionsVariableList,
)
from ghvars.paginator import Fold, concat_items
from ghvars.repository import Repository

_concat_variables = concat_items("variables")


class ActionsVariables(ABC):
    """Repository and environment scoped variables. Mixed into Client, which supplies the
    request and pagination primitives"""

    @abstractmethod
    def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """Get the parsed body of a GET request"""

    @abstractmethod
    def post(self, path: str, data: Any = None) -> Any:
        """Get the parsed body of a POST request"""

    @abstractmethod
    def patch(self, path: str, data: Any = None) -> Any:
        """Get the parsed body of a PATCH request"""

    @abstractmethod
    def boolean_from_response(self, method: str, path: str, data: Any = None) -> bool:
        """Send a request and get whether it succeeded"""

    @abstractmethod
    def paginate(
        self,
        path: str,
        fold: Optional[Fold] = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Fetch a list endpoint, following next links when auto pagination is on"""

    # Repository variables

    def list_actions_variables(self, repo: Any) -> ActionsVariableList:
        """List the variables of a repository

        Args:
            repo: A repository id, 'owner/name' string, mapping or Repository

        Returns:
            ActionsVariableList: total_count and the variables fetched
        """
        data = self.paginate(f"{Repository.path(repo)}/actions/variables", _concat_variables)
        return ACTIONS_VARIABLE_LIST_ADAPTER.validate_python(data)

    def get_actions_variable(self, repo: Any, name: str) -> ActionsVariable:
        data = self.get(f"{Repository.path(repo)}/actions/variables/{_variable_segment(name)}")
        return ACTIONS_VARIABLE_ADAPTER.validate_python(data)

    def create_actions_variable(self, repo: Any, name: str, value: str) -> Any:
        """Create a repository variable. The server responds with 201 Created"""
        return self.post(
            f"{Repository.path(repo)}/actions/variables", {"name": name, "value": value}
        )

    def update_actions_variable(
        self, repo: Any, name: str, value: str, new_name: str | None = None
    ) -> None:
        """Update the value of a repository variable, optionally renaming it.
        The server responds with 204 No Content"""
        self.patch(
            f"{Repository.path(repo)}/actions/variables/{_variable_segment(name)}",
            {"name": new_name or name, "value": value},
        )

    def delete_actions_variable(self, repo: Any, name: str) -> bool:
        """Delete a repository variable

        Raises:
            NotFoundError: If there is no such variable
        """
        return self.boolean_from_response(
            "DELETE", f"{Repository.path(repo)}/actions/variables/{_variable_segment(name)}"
        )

    # Environment variables

    def list_actions_environment_variables(
        self, repo: Any, environment: str
    ) -> ActionsVariableList:
        """List the variables of a deployment environment

        Args:
            repo: A repository id, 'owner/name' string, mapping or Repository
            environment: The name of the environment

        Returns:
            ActionsVariableList: total_count and the variables fetched
        """
        data = self.paginate(
            f"{_environment_path(repo, environment)}/variables", _concat_variables
        )
        return ACTIONS_VARIABLE_LIST_ADAPTER.validate_python(data)

    def get_actions_environment_variable(
        self, repo: Any, environment: str, name: str
    ) -> ActionsVariable:
        data = self.get(f"{_environment_path(repo, environment)}/variables/{_variable_segment(name)}")
        return ACTIONS_VARIABLE_ADAPTER.validate_python(data)

    def create_actions_environment_variable(
        self, repo: Any, environment: str, name: str, value: str
    ) -> Any:
        return self.post(
            f"{_environment_path(repo, environment)}/variables",
            {"name": name, "value": value},
        )

    def update_actions_environment_variable(
        self,
        repo: Any,
        environment: str,
        name: str,
        value: str,
        new_name: str | None = None,
    ) -> None:
        self.patch(
            f"{_environment_path(repo, environment)}/variables/{_variable_segment(name)}",
            {"name": new_name or name, "value": value},
        )

    def delete_actions_environment_variable(
        self, repo: Any, environment: str, name: str
    ) -> bool:
        return self.boolean_from_response(
            "DELETE", f"{_environment_path(repo, environment)}/variables/{_variable_segment(name)}"
        )


def _environment_path(repo: Any, environment: str) -> str:
    return f"{Repository.path(repo)}/environments/{quote(environment, safe='')}"


def _variable_segment(name: str) -> str:
    if not name or name in (".", ".."):
        raise ValueError(f"{name!r} is not a valid variable name")
    return quote(name, safe="")

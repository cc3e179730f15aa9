"""
In-memory planning state backed by the API client.
"""

import json
from typing import Any, Dict, List, Optional

from kappaplan.client.api_client import ApiClient
from kappaplan.core.logging import get_logger

logger = get_logger(__name__)

REFERENCE_RESOURCES = ("customers", "types", "parts", "tests")


class PlanningStore:
    """
    Caches the planning lists and settings.

    Every change goes to the API first; the cache is refreshed from the
    response or reloaded, so it never holds rows the server rejected.
    """

    def __init__(self, client: ApiClient):
        self.client = client
        self.references: Dict[str, List[Dict[str, Any]]] = {name: [] for name in REFERENCE_RESOURCES}
        self.projects: List[Dict[str, Any]] = []
        self.settings: Dict[str, Any] = {}

    @property
    def customers(self) -> List[Dict[str, Any]]:
        return self.references["customers"]

    @property
    def types(self) -> List[Dict[str, Any]]:
        return self.references["types"]

    @property
    def parts(self) -> List[Dict[str, Any]]:
        return self.references["parts"]

    @property
    def tests(self) -> List[Dict[str, Any]]:
        return self.references["tests"]

    async def load(self) -> None:
        """Fetch every list and the settings."""
        for resource in REFERENCE_RESOURCES:
            self.references[resource] = await self.client.list_reference(resource)
        self.projects = await self.client.list_projects()
        self.settings = await self.client.get_settings()
        logger.info(
            "Planning store loaded",
            extra={"projects": len(self.projects)},
        )

    async def _reload_reference(self, resource: str) -> None:
        self.references[resource] = await self.client.list_reference(resource)

    async def add_item(self, resource: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """Add (or replace) an item of a reference list."""
        stored = await self.client.save_reference(resource, item)
        await self._reload_reference(resource)
        return stored

    async def rename_item(self, resource: str, item_id: str, name: str) -> None:
        await self.client.rename_reference(resource, item_id, name)
        await self._reload_reference(resource)

    async def delete_item(self, resource: str, item_id: str) -> None:
        await self.client.delete_reference(resource, item_id)
        self.references[resource] = [
            item for item in self.references[resource] if item["id"] != item_id
        ]

    def find_project(self, project_id: str) -> Optional[Dict[str, Any]]:
        for project in self.projects:
            if project["id"] == project_id:
                return project
        return None

    def _replace_project(self, project: Dict[str, Any]) -> None:
        self.projects = [p for p in self.projects if p["id"] != project["id"]]
        self.projects.insert(0, project)

    async def add_project(self, project: Dict[str, Any]) -> Dict[str, Any]:
        stored = await self.client.save_project(project)
        self._replace_project(stored)
        return stored

    async def update_project(self, project_id: str, changes: Dict[str, Any]) -> None:
        await self.client.update_project(project_id, changes)
        self._replace_project(await self.client.get_project(project_id))

    async def set_week(self, project_id: str, week: str, ist: int, soll: int, **flags: Any) -> None:
        """Write one project week and update the cached week map."""
        await self.client.update_project_week(project_id, week, ist, soll, **flags)
        self._replace_project(await self.client.get_project(project_id))

    async def delete_project(self, project_id: str) -> None:
        await self.client.delete_project(project_id)
        self.projects = [p for p in self.projects if p["id"] != project_id]

    async def update_settings(self, settings: Dict[str, Any]) -> None:
        await self.client.update_settings(settings)
        self.settings = dict(settings)

    async def clear_all(self) -> None:
        """Clear the planning tables on the server and in the cache."""
        await self.client.clear_all()
        self.references = {name: [] for name in REFERENCE_RESOURCES}
        self.projects = []

    async def export_data(self) -> str:
        """Full export as a JSON document."""
        data = await self.client.export_data()
        return json.dumps(data, indent=2, ensure_ascii=False)

    async def import_data(self, json_data: str) -> None:
        """Import a JSON export document and reload the cache."""
        await self.client.import_data(json.loads(json_data))
        await self.load()

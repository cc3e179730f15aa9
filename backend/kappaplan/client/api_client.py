"""
Async API client using httpx.
One method per REST endpoint of the service.
"""

from typing import Any, Dict, List, Optional
import httpx

from kappaplan.core.logging import get_logger

logger = get_logger(__name__)


class ApiError(Exception):
    """Non-2xx response from the API."""
    def __init__(self, status_code: int, message: str, path: str):
        self.status_code = status_code
        self.message = message
        self.path = path
        super().__init__(f"{status_code} {path}: {message}")


class ApiClient:
    """
    Async client for the Kappaplan REST API.

    Pass ``transport`` to talk to an in-process ASGI app instead of the network.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/api",
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _send(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        response = await self._client.request(method, endpoint, **kwargs)
        if response.is_error:
            try:
                message = response.json()["error"]["message"]
            except (ValueError, KeyError, TypeError):
                message = response.text
            logger.warning(
                f"API request failed: {method} {endpoint}",
                extra={"status_code": response.status_code},
            )
            raise ApiError(response.status_code, str(message), endpoint)
        return response

    async def _json(self, method: str, endpoint: str, **kwargs: Any) -> Any:
        response = await self._send(method, endpoint, **kwargs)
        return response.json()

    @staticmethod
    def _params(**params: Any) -> Dict[str, Any]:
        return {key: value for key, value in params.items() if value is not None}

    # Reference lists

    async def list_reference(self, resource: str) -> List[Dict[str, Any]]:
        """List one of ``customers``, ``types``, ``parts`` or ``tests``."""
        return await self._json("GET", f"/{resource}")

    async def get_reference(self, resource: str, item_id: str) -> Dict[str, Any]:
        return await self._json("GET", f"/{resource}/{item_id}")

    async def save_reference(self, resource: str, item: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", f"/{resource}", json=item)

    async def rename_reference(self, resource: str, item_id: str, name: str) -> None:
        await self._send("PUT", f"/{resource}/{item_id}", json={"name": name})

    async def delete_reference(self, resource: str, item_id: str) -> None:
        await self._send("DELETE", f"/{resource}/{item_id}")

    # Projects

    async def list_projects(self) -> List[Dict[str, Any]]:
        return await self._json("GET", "/projects")

    async def get_project(self, project_id: str) -> Dict[str, Any]:
        return await self._json("GET", f"/projects/{project_id}")

    async def save_project(self, project: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", "/projects", json=project)

    async def update_project(self, project_id: str, changes: Dict[str, Any]) -> None:
        await self._send("PUT", f"/projects/{project_id}", json=changes)

    async def update_project_week(
        self,
        project_id: str,
        week: str,
        ist: int,
        soll: int,
        **flags: Any,
    ) -> None:
        """Set the quantities (and optional flags) of one project week."""
        body = {"ist": ist, "soll": soll, **flags}
        await self._send("PATCH", f"/projects/{project_id}/weeks/{week}", json=body)

    async def delete_project(self, project_id: str) -> None:
        await self._send("DELETE", f"/projects/{project_id}")

    # Comments

    async def list_comments(self) -> List[Dict[str, Any]]:
        return await self._json("GET", "/comments")

    async def save_comment(self, comment: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", "/comments", json=comment)

    async def delete_comment(self, comment_id: str) -> None:
        await self._send("DELETE", f"/comments/{comment_id}")

    # Employees

    async def list_employees(self) -> List[Dict[str, Any]]:
        return await self._json("GET", "/employees")

    async def get_employee(self, employee_id: str) -> Dict[str, Any]:
        return await self._json("GET", f"/employees/{employee_id}")

    async def save_employee(self, employee: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", "/employees", json=employee)

    async def update_employee(self, employee_id: str, changes: Dict[str, Any]) -> None:
        await self._send("PUT", f"/employees/{employee_id}", json=changes)

    async def delete_employee(self, employee_id: str) -> None:
        await self._send("DELETE", f"/employees/{employee_id}")

    async def get_employee_details(self, employee_id: str) -> Dict[str, Any]:
        return await self._json("GET", f"/employee-details/{employee_id}")

    async def save_employee_details(self, employee_id: str, details: Dict[str, Any]) -> None:
        await self._send("PUT", f"/employee-details/{employee_id}", json=details)

    async def list_qualifications(self, employee_id: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self._json("GET", "/qualifications", params=self._params(employeeId=employee_id))

    async def save_qualification(self, qualification: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", "/qualifications", json=qualification)

    async def delete_qualification(self, qualification_id: str) -> None:
        await self._send("DELETE", f"/qualifications/{qualification_id}")

    # Schedule

    async def list_assignments(
        self,
        week: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        params = self._params(week=week, employeeId=employee_id)
        return await self._json("GET", "/schedule-assignments", params=params)

    async def save_assignment(self, assignment: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", "/schedule-assignments", json=assignment)

    async def delete_assignment(self, assignment_id: str) -> None:
        await self._send("DELETE", f"/schedule-assignments/{assignment_id}")

    async def list_templates(self) -> List[Dict[str, Any]]:
        return await self._json("GET", "/templates")

    async def save_template(self, template: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", "/templates", json=template)

    async def delete_template(self, template_id: str) -> None:
        await self._send("DELETE", f"/templates/{template_id}")

    async def list_extra_tasks(self, week: Optional[str] = None) -> List[Dict[str, Any]]:
        return await self._json("GET", "/extra-tasks", params=self._params(week=week))

    async def save_extra_task(self, task: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", "/extra-tasks", json=task)

    async def update_extra_task(self, task_id: str, changes: Dict[str, Any]) -> None:
        await self._send("PUT", f"/extra-tasks/{task_id}", json=changes)

    async def delete_extra_task(self, task_id: str) -> None:
        await self._send("DELETE", f"/extra-tasks/{task_id}")

    # Absences

    async def list_absence_types(self, include_inactive: bool = False) -> List[Dict[str, Any]]:
        endpoint = "/absence-types/all" if include_inactive else "/absence-types"
        return await self._json("GET", endpoint)

    async def save_absence_type(self, absence_type: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", "/absence-types", json=absence_type)

    async def update_absence_type(self, type_id: str, changes: Dict[str, Any]) -> None:
        await self._send("PUT", f"/absence-types/{type_id}", json=changes)

    async def list_absence_limits(
        self,
        employee_id: Optional[str] = None,
        year: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        params = self._params(employeeId=employee_id, year=year)
        return await self._json("GET", "/absence-limits", params=params)

    async def save_absence_limit(self, limit: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", "/absence-limits", json=limit)

    async def set_absence_limits(
        self,
        employee_id: str,
        year: int,
        limits: List[Dict[str, Any]],
    ) -> None:
        body = {"employeeId": employee_id, "year": year, "limits": limits}
        await self._send("POST", "/absence-limits/bulk", json=body)

    async def list_absences(
        self,
        employee_id: Optional[str] = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
        status: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        params = self._params(employeeId=employee_id, year=year, month=month, status=status)
        return await self._json("GET", "/absences", params=params)

    async def create_absence(self, absence: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", "/absences", json=absence)

    async def update_absence(self, absence_id: str, absence: Dict[str, Any]) -> None:
        await self._send("PUT", f"/absences/{absence_id}", json=absence)

    async def delete_absence(self, absence_id: str) -> None:
        await self._send("DELETE", f"/absences/{absence_id}")

    async def list_holidays(self, year: Optional[int] = None) -> List[Dict[str, Any]]:
        return await self._json("GET", "/holidays", params=self._params(year=year))

    async def save_holiday(self, holiday: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", "/holidays", json=holiday)

    async def delete_holiday(self, holiday_date: str) -> None:
        await self._send("DELETE", f"/holidays/{holiday_date}")

    # Activity log, preferences and settings

    async def list_logs(self) -> List[Dict[str, Any]]:
        return await self._json("GET", "/logs")

    async def add_log(self, entry: Dict[str, Any]) -> Dict[str, Any]:
        return await self._json("POST", "/logs", json=entry)

    async def clear_logs(self) -> None:
        await self._send("DELETE", "/logs/clear")

    async def export_logs_excel(self) -> bytes:
        response = await self._send("GET", "/logs/export-excel")
        return response.content

    async def get_preferences(self) -> Dict[str, Any]:
        return await self._json("GET", "/preferences")

    async def get_preference(self, key: str) -> Any:
        return await self._json("GET", f"/preferences/{key}")

    async def set_preference(self, key: str, value: Any) -> None:
        await self._send("PUT", f"/preferences/{key}", json={"value": value})

    async def delete_preference(self, key: str) -> None:
        await self._send("DELETE", f"/preferences/{key}")

    async def get_settings(self) -> Dict[str, Any]:
        return await self._json("GET", "/settings")

    async def update_settings(self, settings: Dict[str, Any]) -> None:
        await self._send("PUT", "/settings", json=settings)

    # Bulk data

    async def export_data(self, module: Optional[str] = None) -> Dict[str, Any]:
        endpoint = f"/data/export/{module}" if module else "/data/export"
        return await self._json("GET", endpoint)

    async def import_data(self, data: Dict[str, Any], module: Optional[str] = None) -> Dict[str, Any]:
        endpoint = f"/data/import/{module}" if module else "/data/import"
        return await self._json("POST", endpoint, json=data)

    async def clear_all(self) -> Dict[str, Any]:
        """Clear projects, their weeks and the reference lists."""
        return await self._json("DELETE", "/data/clear")

    async def clear_table(self, table: str) -> Dict[str, Any]:
        return await self._json("DELETE", f"/data/clear/{table}")

    async def download_database(self) -> bytes:
        response = await self._send("GET", "/data/download-db")
        return response.content

    async def upload_database(self, content: bytes, filename: str = "kappaplan.db") -> Dict[str, Any]:
        files = {"file": (filename, content, "application/x-sqlite3")}
        return await self._json("POST", "/data/upload-db", files=files)

    async def create_backup(self, path: Optional[str] = None) -> Dict[str, Any]:
        return await self._json("POST", "/data/backup", json={"path": path})

    async def list_backups(self, path: Optional[str] = None) -> Dict[str, Any]:
        return await self._json("GET", "/data/backups", params=self._params(path=path))

    async def restore_backup(self, filename: str, backup_path: Optional[str] = None) -> Dict[str, Any]:
        body = {"filename": filename, "backupPath": backup_path}
        return await self._json("POST", "/data/backup/restore", json=body)

    async def export_planning_excel(self, year: Optional[int] = None) -> bytes:
        response = await self._send("GET", "/data/export-excel", params=self._params(year=year))
        return response.content

    async def health_check(self) -> bool:
        """True when the API answers its health check."""
        try:
            data = await self._json("GET", "/health")
        except (ApiError, httpx.HTTPError):
            return False
        return data.get("status") == "ok"

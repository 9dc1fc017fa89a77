"""Kubernetes ConfigMap gateway implementation."""

from __future__ import annotations

import base64
import binascii
import copy
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from carbon_exporter.domain.entities.config_document import ConfigDocument
from carbon_exporter.domain.entities.errors import ConfigStoreError
from carbon_exporter.domain.gateways.config_store_gateway import IConfigStoreGateway
from carbon_exporter.shared import get_logger

logger = get_logger(__name__)


class KubernetesConfigMapGateway(IConfigStoreGateway):
    """HTTP-based gateway for ConfigMaps of the Kubernetes core API."""

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def get_document(
        self, namespace: str, name: str
    ) -> Optional[ConfigDocument]:
        """Return the ConfigMap, or ``None`` when the API answers 404."""

        url = self._item_url(namespace, name)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, headers=self._build_headers())
                if response.status_code == httpx.codes.NOT_FOUND:
                    logger.info("configmap.get.not_found", namespace=namespace, name=name)
                    return None
                response.raise_for_status()
                return self._parse_document(response.json())

        except httpx.HTTPStatusError as exc:
            raise self._status_error("get", namespace, name, exc) from exc
        except httpx.RequestError as exc:
            raise self._request_error("get", namespace, name, exc) from exc
        except ValueError as exc:
            raise ConfigStoreError(
                f"Invalid ConfigMap response for {namespace}/{name}: {exc}"
            ) from exc

    async def create_document(self, document: ConfigDocument) -> ConfigDocument:
        """Create the ConfigMap and return the stored copy."""

        url = self._collection_url(document.namespace)
        logger.info(
            "configmap.create.request",
            url=url,
            namespace=document.namespace,
            name=document.name,
        )

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    url,
                    headers=self._build_headers(),
                    json=self._build_body(document),
                )
                response.raise_for_status()
                return self._parse_document(response.json())

        except httpx.HTTPStatusError as exc:
            raise self._status_error(
                "create", document.namespace, document.name, exc
            ) from exc
        except httpx.RequestError as exc:
            raise self._request_error(
                "create", document.namespace, document.name, exc
            ) from exc
        except ValueError as exc:
            raise ConfigStoreError(
                f"Invalid ConfigMap response for {document.namespace}/"
                f"{document.name}: {exc}"
            ) from exc

    async def update_document(self, document: ConfigDocument) -> ConfigDocument:
        """
        Replace the ConfigMap in a single PUT.

        The resource version read earlier is sent along, so a concurrent
        writer makes the API server answer 409 instead of silently losing
        one of the updates.
        """

        url = self._item_url(document.namespace, document.name)
        logger.info(
            "configmap.update.request",
            url=url,
            namespace=document.namespace,
            name=document.name,
            resource_version=document.resource_version,
        )

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.put(
                    url,
                    headers=self._build_headers(),
                    json=self._build_body(document),
                )
                response.raise_for_status()
                return self._parse_document(response.json())

        except httpx.HTTPStatusError as exc:
            raise self._status_error(
                "update", document.namespace, document.name, exc
            ) from exc
        except httpx.RequestError as exc:
            raise self._request_error(
                "update", document.namespace, document.name, exc
            ) from exc
        except ValueError as exc:
            raise ConfigStoreError(
                f"Invalid ConfigMap response for {document.namespace}/"
                f"{document.name}: {exc}"
            ) from exc

    def _collection_url(self, namespace: str) -> str:
        return (
            f"{self._base_url}/api/v1/namespaces/{quote(namespace, safe='')}/configmaps"
        )

    def _item_url(self, namespace: str, name: str) -> str:
        return f"{self._collection_url(namespace)}/{quote(name, safe='')}"

    def _build_headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    def _build_body(self, document: ConfigDocument) -> Dict[str, Any]:
        """
        Build the request body on top of the object last read from the store.

        Only identity, version, labels, annotations and the two data maps are
        rewritten; every other field is sent back as it was received.
        """
        body: Dict[str, Any] = copy.deepcopy(document.raw)
        body["apiVersion"] = body.get("apiVersion") or "v1"
        body["kind"] = body.get("kind") or "ConfigMap"

        metadata: Dict[str, Any] = dict(body.get("metadata") or {})
        metadata["name"] = document.name
        metadata["namespace"] = document.namespace
        if document.resource_version:
            metadata["resourceVersion"] = document.resource_version
        else:
            metadata.pop("resourceVersion", None)
        _set_or_drop(metadata, "labels", dict(document.labels))
        _set_or_drop(metadata, "annotations", dict(document.annotations))
        body["metadata"] = metadata

        _set_or_drop(body, "data", dict(document.data))
        _set_or_drop(
            body,
            "binaryData",
            {
                key: base64.b64encode(value).decode("ascii")
                for key, value in document.binary_data.items()
            },
        )
        return body

    def _parse_document(self, payload: Dict[str, Any]) -> ConfigDocument:
        metadata = payload.get("metadata") or {}
        try:
            binary_data = {
                key: base64.b64decode(value, validate=True)
                for key, value in (payload.get("binaryData") or {}).items()
            }
        except binascii.Error as exc:
            raise ValueError(f"binaryData is not valid base64: {exc}") from exc

        return ConfigDocument(
            namespace=metadata.get("namespace", ""),
            name=metadata.get("name", ""),
            data=dict(payload.get("data") or {}),
            binary_data=binary_data,
            resource_version=metadata.get("resourceVersion"),
            labels=dict(metadata.get("labels") or {}),
            annotations=dict(metadata.get("annotations") or {}),
            raw=payload,
        )

    def _status_error(
        self,
        operation: str,
        namespace: str,
        name: str,
        exc: httpx.HTTPStatusError,
    ) -> ConfigStoreError:
        status_code = exc.response.status_code
        logger.error(
            f"configmap.{operation}.http_error",
            namespace=namespace,
            name=name,
            status_code=status_code,
            response_text=exc.response.text,
        )
        if status_code == httpx.codes.CONFLICT:
            message = (
                f"Conflict on ConfigMap {namespace}/{name} during {operation}; "
                "it was modified concurrently"
            )
        else:
            message = (
                f"Failed to {operation} ConfigMap {namespace}/{name}: "
                f"HTTP {status_code} {exc.response.text}"
            )
        return ConfigStoreError(
            message,
            details={
                "operation": operation,
                "namespace": namespace,
                "name": name,
                "status_code": status_code,
            },
        )

    def _request_error(
        self,
        operation: str,
        namespace: str,
        name: str,
        exc: httpx.RequestError,
    ) -> ConfigStoreError:
        logger.error(
            f"configmap.{operation}.request_error",
            namespace=namespace,
            name=name,
            error=str(exc),
        )
        return ConfigStoreError(
            f"Network error during {operation} of ConfigMap {namespace}/{name}: {exc}",
            details={"operation": operation, "namespace": namespace, "name": name},
        )


def _set_or_drop(target: Dict[str, Any], key: str, value: Dict[str, Any]) -> None:
    if value:
        target[key] = value
    else:
        target.pop(key, None)

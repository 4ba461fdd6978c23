"""Load the protoc request and extract service structure from descriptors.

Decodes the CodeGeneratorRequest handed over by protoc and pulls package,
services and method names out of each FileDescriptorProto.
"""

from __future__ import annotations

import logging
from typing import Any

from google.protobuf.compiler import plugin_pb2
from google.protobuf.descriptor_pb2 import FileDescriptorProto

logger = logging.getLogger(__name__)

# Well-known types that get no client wrapper
TIMESTAMP_PATH = "google/protobuf/timestamp.proto"
_SKIP_FILES: set[str] = {TIMESTAMP_PATH}


def load_request(data: bytes) -> plugin_pb2.CodeGeneratorRequest:
    """Decode a serialized CodeGeneratorRequest. Empty input gives an empty request."""
    request = plugin_pb2.CodeGeneratorRequest()
    if data:
        request.ParseFromString(data)
    return request


def files_to_generate(
    request: plugin_pb2.CodeGeneratorRequest,
) -> list[FileDescriptorProto]:
    """Return the descriptors protoc asked us to generate, in request order.

    proto_file also carries every transitive dependency; only the names in
    file_to_generate are returned.
    """
    by_name = {f.name: f for f in request.proto_file}
    return [by_name[name] for name in request.file_to_generate]


def is_skipped(file: FileDescriptorProto) -> bool:
    """Check if a file should produce no output."""
    return file.name in _SKIP_FILES


def extract_services(file: FileDescriptorProto) -> list[dict[str, Any]]:
    """Collect services and their method names in declaration order."""
    services: list[dict[str, Any]] = []
    for service in file.service:
        services.append({
            "name": service.name,
            "package": file.package,
            "methods": [method.name for method in service.method],
        })
        logger.debug(
            "%s: service %s with %d methods",
            file.name, service.name, len(service.method),
        )
    return services

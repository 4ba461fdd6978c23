"""Shared fixtures: FileDescriptorProto builders for generator tests."""

from __future__ import annotations

from typing import Callable

import pytest
from google.protobuf.descriptor_pb2 import FileDescriptorProto


def make_file(
    name: str,
    package: str = "",
    services: dict[str, list[str]] | None = None,
) -> FileDescriptorProto:
    """Build a FileDescriptorProto with the given services and method names."""
    file = FileDescriptorProto(name=name, package=package)
    for service_name, methods in (services or {}).items():
        service = file.service.add(name=service_name)
        for method in methods:
            service.method.add(
                name=method,
                input_type=f".{package}.{method}Request",
                output_type=f".{package}.{method}Response",
            )
    return file


@pytest.fixture
def file_factory() -> Callable[..., FileDescriptorProto]:
    return make_file


@pytest.fixture
def greeter_file() -> FileDescriptorProto:
    """example.api Greeter with a single SayHello method."""
    return make_file("service.proto", "example.api", {"Greeter": ["SayHello"]})


@pytest.fixture
def two_service_file() -> FileDescriptorProto:
    """Services A[X, Y] and B[Z] in declaration order."""
    return make_file(
        "rpc/shop/v1/shop.proto",
        "shop.v1",
        {"A": ["X", "Y"], "B": ["Z"]},
    )

"""Build the Jinja2 template context from a FileDescriptorProto.

The renderer only sees these frozen values, never raw descriptor messages.
"""

from __future__ import annotations

from dataclasses import dataclass

from google.protobuf.descriptor_pb2 import FileDescriptorProto

from .loader import extract_services
from .naming import import_path, service_path_prefix, twirp_path_prefix


@dataclass(frozen=True)
class ServiceContext:
    name: str
    package: str
    methods: tuple[str, ...]


@dataclass(frozen=True)
class RenderContext:
    package: str
    import_path: str
    twirp_prefix: str
    services: tuple[ServiceContext, ...]

    def path_prefix(self, service: ServiceContext) -> str:
        """Value of the exported <Service>PathPrefix constant."""
        return service_path_prefix(self.twirp_prefix, service.package, service.name)


def build_context(file: FileDescriptorProto, twirp_version: str | None = None) -> RenderContext:
    """Build the full template context for one proto file."""
    services = tuple(
        ServiceContext(
            name=service["name"],
            package=service["package"],
            methods=tuple(service["methods"]),
        )
        for service in extract_services(file)
    )
    return RenderContext(
        package=file.package,
        import_path=import_path(file),
        twirp_prefix=twirp_path_prefix(twirp_version),
        services=services,
    )

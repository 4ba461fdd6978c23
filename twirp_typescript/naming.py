"""Derive TypeScript identifiers, import paths and file names from proto names.

Examples:
  foo/bar/service.proto        -> service.twirp.ts, import './service.pb'
  package example.api          -> import {example} from ...
  method CreateUser            -> prototype.createUser
  version v6 / anything else   -> ''  / '/twirp'
"""

from __future__ import annotations

from google.protobuf.descriptor_pb2 import FileDescriptorProto

# Twirp v6 dropped the /twirp route prefix
_PREFIXLESS_VERSION = "v6"
_TWIRP_PREFIX = "/twirp"

OUTPUT_SUFFIX = ".twirp.ts"


def base_name(file_name: str) -> str:
    """Return the last path segment of a proto file name, cut at the first '.'."""
    return file_name.rsplit("/", 1)[-1].split(".")[0]


def import_path(file: FileDescriptorProto) -> str:
    """Module name of the compiled protobufjs messages for this file."""
    return base_name(file.name)


def output_file_name(file: FileDescriptorProto) -> str:
    return base_name(file.name) + OUTPUT_SUFFIX


def lower_initial(identifier: str) -> str:
    """Lower-case only the first character: 'CreateUser' -> 'createUser'."""
    return identifier[:1].lower() + identifier[1:]


def import_binding(package: str) -> str:
    """Named-import binding for the root namespace of a package.

    'foo.bar.baz' -> '{foo}'. An empty package yields '' and the emitted
    import is left without a binding.
    """
    root = package.split(".")[0]
    if not root:
        return ""
    return "{" + root + "}"


def twirp_path_prefix(version: str | None) -> str:
    """Route prefix for the given Twirp protocol version."""
    if version == _PREFIXLESS_VERSION:
        return ""
    return _TWIRP_PREFIX


def service_path_prefix(prefix: str, package: str, service: str) -> str:
    return f"{prefix}/{package}.{service}/"

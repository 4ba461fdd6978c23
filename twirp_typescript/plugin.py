"""protoc plugin host.

Reads a CodeGeneratorRequest from stdin, generates a client for every file
protoc asked for and writes the CodeGeneratorResponse to stdout.

Usage:
  protoc --plugin=protoc-gen-twirp_typescript \\
         --twirp_typescript_out=version=v6:./out service.proto
"""

from __future__ import annotations

import logging
import os
import sys

import jinja2
from google.protobuf.compiler import plugin_pb2

from . import __version__
from .codegen import generate
from .loader import files_to_generate, load_request

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "TWIRP_TS_LOG_LEVEL"


def parse_parameter(parameter: str) -> dict[str, str]:
    """Split a protoc parameter string 'a=1,b=2' into a dict."""
    values: dict[str, str] = {}
    for chunk in parameter.split(","):
        key, _, value = chunk.partition("=")
        key = key.strip()
        if not key:
            continue
        values[key] = value.strip()
    return values


def generate_response(
    request: plugin_pb2.CodeGeneratorRequest,
) -> plugin_pb2.CodeGeneratorResponse:
    """Run the generator over a request and build the response message."""
    params = parse_parameter(request.parameter)
    twirp_version = params.get("version")
    logger.debug("Twirp version: %s", twirp_version or "default")

    response = plugin_pb2.CodeGeneratorResponse()
    response.supported_features = plugin_pb2.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL

    for proto_file in files_to_generate(request):
        try:
            generated = generate(proto_file, twirp_version)
        except jinja2.TemplateError as e:
            logger.error("Generation failed for %s: %s", proto_file.name, e)
            response.ClearField("file")
            response.error = f"{proto_file.name}: {e}"
            return response
        response.file.extend(generated)

    return response


def _configure_logging() -> None:
    # stdout carries the response
    logging.basicConfig(
        stream=sys.stderr,
        level=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        format="protoc-gen-twirp_typescript: %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    if "--version" in sys.argv[1:]:
        print(__version__)
        return

    _configure_logging()
    request = load_request(sys.stdin.buffer.read())
    response = generate_response(request)
    sys.stdout.buffer.write(response.SerializeToString())


if __name__ == "__main__":
    main()

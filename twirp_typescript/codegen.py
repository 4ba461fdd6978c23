"""Render the client template and wrap it into a protoc output file.

Takes the context from context_builder and produces <name>.twirp.ts.
"""

from __future__ import annotations

import logging
from pathlib import Path

import jinja2
from google.protobuf.compiler import plugin_pb2
from google.protobuf.descriptor_pb2 import FileDescriptorProto

from .context_builder import RenderContext, build_context
from .loader import is_skipped
from .naming import import_binding, lower_initial, output_file_name

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "client.twirp.ts.j2"


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["lower_initial"] = lower_initial
    env.filters["import_binding"] = import_binding
    return env


def render(context: RenderContext, template_name: str = TEMPLATE_NAME) -> str:
    """Render the client template against a context.

    Template syntax errors and undefined lookups raise jinja2 errors
    unchanged; nothing is returned for a failed render.
    """
    template = _environment().get_template(template_name)
    return template.render(ctx=context)


def generate(
    file: FileDescriptorProto,
    twirp_version: str | None = None,
) -> list[plugin_pb2.CodeGeneratorResponse.File]:
    """Generate the Twirp client for one proto file.

    Returns an empty list for skipped well-known files, otherwise a single
    output file.
    """
    if is_skipped(file):
        logger.debug("Skipping well-known file %s", file.name)
        return []

    context = build_context(file, twirp_version)
    content = render(context)

    out = plugin_pb2.CodeGeneratorResponse.File()
    out.name = output_file_name(file)
    out.content = content

    logger.info("Generated %s (%d services)", out.name, len(context.services))
    return [out]

"""API Blueprint renderer.

Serializes an Api documentation tree into an API Blueprint (format 1A9)
Markdown document. Output layout (indentation, blank lines) is consumed
by Blueprint parsers and must stay byte-stable.
"""

import json
import logging

from api_blueprint.errors import InvalidInputError
from api_blueprint.model.base import Action, Api, Field, Resource, ResourceGroup, ResourceType
from api_blueprint.renderer.problem import ApiProblemRenderer, ProblemRenderer

logger = logging.getLogger(__name__)

FORMAT = "1A9"
CODE_BLOCK_INDENT = " " * 8  # tabs are not accepted by Blueprint parsers
ATTRIBUTE_INDENT = " " * 4
EMPTY_ROW = "\n\n"

TYPE_ALIASES = {
    "int": "number",
    "integer": "number",
    "bool": "boolean",
    "text": "string",
    "datetime": "string",
    "json_array": "string",
}

# Collections are paginated and filterable by the serving framework,
# so these query parameters exist regardless of the model.
COLLECTION_PARAMETERS = (
    "+ Parameters\n"
    "    + page (number, optional) - Seek through the results when the number of results exceeds `limit`.\n"
    "        + Default: `1`\n"
    "    + limit (number, optional) - Number of results per `page`.\n"
    "        + Default: `10`\n"
    "    + filter (enum[array], optional) - Apply filters on the results by one or more attributes."
    ' Learn more about how to use this feature <a href="/api/query">here</a>.\n'
    "        + Members\n"
    "            + `type`\n"
    "            + `field`\n"
    "            + `value`\n"
    "            + `alias`\n"
    "    + order%2Dby (enum[array], optional) - Sort the results by one or more attributes."
    ' Learn more about how to use this feature <a href="/api/query">here</a>.\n'
    "        + Members\n"
    "            + `type` (string, required)\n"
    "            + `field` (string, required)\n"
    "            + `direction` (string, optional)\n"
    "\n\n"
)


def normalize_field_type(field_type: str | None) -> str | None:
    """Map framework type names onto Blueprint (MSON) base types."""
    if not field_type:
        return field_type
    return TYPE_ALIASES.get(field_type, field_type)


def format_property(field: Field) -> str:
    """Format a body field as an MSON attribute line (without bullet)."""
    output = field.name

    if field.example is not None and field.example != "":
        output += f": `{_format_example(field.example)}`"

    field_type = normalize_field_type(field.field_type) or ""
    separator = ", " if field_type else ""
    requirement = "required" if field.required else "optional"
    output += f" ({field_type}{separator}{requirement})"

    if field.description:
        output += f" - {field.description}"

    return output


def format_code_block(text: str) -> str:
    """Indent every line of text so Blueprint reads it as a code block."""
    return CODE_BLOCK_INDENT + text.replace("\n", "\n" + CODE_BLOCK_INDENT)


def _format_example(example) -> str:
    if isinstance(example, bool):
        return "true" if example else "false"
    if isinstance(example, (dict, list)):
        return json.dumps(example, ensure_ascii=False)
    return str(example)


class BlueprintRenderer:
    """Renders documentation trees into API Blueprint documents.

    The instance holds no render state; each ``render`` call builds its own
    buffer, so one renderer can be shared across requests.
    """

    def __init__(self, problem_renderer: ProblemRenderer | None = None):
        self.problem_renderer = problem_renderer or ApiProblemRenderer()

    def render(self, api: Api, scheme: str, host: str, tag: str | None = None) -> str:
        """Render the full document for ``api``, optionally restricted to groups tagged ``tag``."""
        if api is None:
            raise InvalidInputError("No API documentation given to render")

        parts: list[str] = [
            f"FORMAT: {FORMAT}\n",
            f"HOST: {scheme}://{host}{EMPTY_ROW}",
            f"# {api.name}\n",
        ]
        if api.description:
            parts.append(f"{api.description}\n")

        for group in api.resource_groups:
            if not group.matches_tag(tag):
                logger.debug("Skipping group %r: not tagged %r", group.name, tag)
                continue
            self._write_resource_group(parts, group)

        document = "".join(parts)
        logger.debug("Rendered API Blueprint for %r (%d chars)", api.name, len(document))
        return document

    def _write_resource_group(self, parts: list[str], group: ResourceGroup) -> None:
        parts.append(f"# Group {group.name}\n")
        parts.append(f"{group.description}\n")
        for resource in group.resources:
            if not resource.actions:
                logger.debug("Skipping resource %r: no actions", resource.name)
                continue
            self._write_resource(parts, resource)

    def _write_resource(self, parts: list[str], resource: Resource) -> None:
        parts.append(f"## {resource.name} [{resource.uri}]\n")
        self._write_uri_parameters(parts, resource)
        for action in resource.actions:
            self._write_action(parts, action, resource.resource_type)

    def _write_uri_parameters(self, parts: list[str], resource: Resource) -> None:
        if resource.resource_type is ResourceType.RPC:
            return
        if resource.resource_type is ResourceType.ENTITY:
            parts.append(f"+ Parameters\n{ATTRIBUTE_INDENT}+ {resource.parameter}{EMPTY_ROW}")
            return
        parts.append(COLLECTION_PARAMETERS)

    def _write_action(self, parts: list[str], action: Action, resource_type: ResourceType) -> None:
        parts.append(f"### {action.description} [{action.http_method}]{EMPTY_ROW}")

        entity_read_or_delete = resource_type is ResourceType.ENTITY and action.http_method in ("GET", "DELETE")
        if not entity_read_or_delete:
            self._write_body_properties(parts, action.body_properties)

        if action.allows_changing_entity() and action.request_description:
            parts.append(f"+ Request{EMPTY_ROW}")
            parts.append(format_code_block(action.request_description) + EMPTY_ROW)

        self._write_responses(parts, action)

    def _write_body_properties(self, parts: list[str], fields: list[Field]) -> None:
        parts.append("+ Attributes (object)\n")
        for field in fields:
            parts.append(f"{ATTRIBUTE_INDENT}+ {format_property(field)}\n")
        parts.append(EMPTY_ROW)

    def _write_responses(self, parts: list[str], action: Action) -> None:
        for response in action.possible_responses:
            parts.append(f"+ Response {response.code}{EMPTY_ROW}")
            if response.code == 200:
                parts.append(format_code_block(action.response_description) + EMPTY_ROW)
            elif response.code >= 400:
                body = self.problem_renderer.render(response.code, response.message)
                parts.append(format_code_block(body) + EMPTY_ROW)

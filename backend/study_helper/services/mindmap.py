"""Mind map parsing for model replies."""

import json
import logging

from pydantic import ValidationError as SchemaError

from study_helper.schemas.ai import MindMap
from study_helper.services.text import extract_json_object

logger = logging.getLogger(__name__)

FALLBACK_MIND_MAP = MindMap(
    nodes=[
        {"id": "central", "label": "Main Topic", "type": "central"},
        {"id": "node1", "label": "Key Point 1", "type": "branch"},
        {"id": "node2", "label": "Key Point 2", "type": "branch"},
    ],
    edges=[
        {"source": "central", "target": "node1"},
        {"source": "central", "target": "node2"},
    ],
)


def parse_mind_map(raw: str) -> MindMap:
    """Parse a model reply into a MindMap.

    Raises ValueError if the reply holds no JSON object with ``nodes`` and
    ``edges`` lists. Nodes without a label or name get a generated label.
    """
    try:
        data = json.loads(extract_json_object(raw))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Mind map reply is not valid JSON: {exc}") from exc
    try:
        mind_map = MindMap.model_validate(data)
    except SchemaError as exc:
        raise ValueError("Invalid mind map structure received") from exc

    for index, node in enumerate(mind_map.nodes):
        if not node.get("label") and not node.get("name"):
            node["label"] = f"Concept {index + 1}"
    logger.info("parsed mind map with %d nodes and %d edges", len(mind_map.nodes), len(mind_map.edges))
    return mind_map

"""
Scene Database.

Handles loading and validation of scene definitions (which entities a
scene holds and which components they carry) and building entities
from them.

Layout under the data path:
    schemas/scene.schema.json
    database/scenes/*.json
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema
from pydantic import BaseModel, Field, ValidationError

from tickengine.core.component import get_component_type
from tickengine.core.entity import Entity


class SceneDataError(Exception):
    """Scene data refers to something that cannot be built."""


class ComponentSpec(BaseModel):
    """One component of an entity: kind token plus constructor params."""
    type: str
    params: dict[str, Any] = Field(default_factory=dict)


class EntitySpec(BaseModel):
    """A named entity and its components, in attach order."""
    name: str
    components: list[ComponentSpec] = Field(default_factory=list)


class SceneDefinition(BaseModel):
    """The full entity set of a scene, in creation order."""
    id: str
    title: str = ""
    entities: list[EntitySpec] = Field(default_factory=list)


def build_entity(spec: EntitySpec) -> Entity:
    """
    Create an entity from its spec.

    Raises:
        SceneDataError: If a component kind is not registered
        pydantic.ValidationError: If component params are invalid
    """
    entity = Entity(spec.name)
    for component_spec in spec.components:
        component_type = get_component_type(component_spec.type)
        if component_type is None:
            raise SceneDataError(
                f"Unknown component type '{component_spec.type}' on entity {spec.name}"
            )
        entity.add(component_type.model_validate(component_spec.params))
    return entity


class SceneDatabase:
    """
    Central storage for scene definitions.
    """

    SCHEMA_NAME = "scene.schema.json"

    def __init__(self, data_path: Path | str):
        self._data_path = Path(data_path)
        self._schema: dict[str, Any] | None = None

        self.scenes: dict[str, SceneDefinition] = {}

        self.logger = logging.getLogger(__name__)

    def load_all(self) -> None:
        """Load all scene definitions from disk."""
        self._load_schema()
        self.scenes = self._load_scenes()

        self.logger.info(f"Loaded {len(self.scenes)} scene definitions.")

    def get_scene(self, scene_id: str) -> SceneDefinition | None:
        return self.scenes.get(scene_id)

    def _load_schema(self) -> None:
        schema_file = self._data_path / "schemas" / self.SCHEMA_NAME
        if not schema_file.exists():
            self.logger.warning(f"Scene schema not found: {schema_file}")
            return

        try:
            with open(schema_file, 'r') as f:
                self._schema = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.logger.error(f"Failed to load schema {schema_file}: {e}")

    def _load_scenes(self) -> dict[str, SceneDefinition]:
        """Load all JSON files in the scenes folder."""
        scenes_dir = self._data_path / "database" / "scenes"
        data_store: dict[str, SceneDefinition] = {}

        if not scenes_dir.exists():
            self.logger.warning(f"Data directory not found: {scenes_dir}")
            return data_store

        if self._schema is None:
            self.logger.warning(f"No schema found for scenes ({self.SCHEMA_NAME})")

        for file_path in sorted(scenes_dir.glob("*.json")):
            try:
                with open(file_path, 'r') as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                self.logger.error(f"Failed to load {file_path}: {e}")
                continue

            # A file holds one scene or a list of scenes
            items = data if isinstance(data, list) else [data]
            for item in items:
                try:
                    if self._schema:
                        jsonschema.validate(instance=item, schema=self._schema)
                    definition = SceneDefinition.model_validate(item)
                except jsonschema.ValidationError as e:
                    self.logger.error(f"Validation error in {file_path}: {e.message}")
                    continue
                except ValidationError as e:
                    self.logger.error(f"Invalid scene in {file_path}: {e}")
                    continue

                data_store[definition.id] = definition

        return data_store

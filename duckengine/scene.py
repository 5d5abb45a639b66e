"""Entities holding components, grouped into a scene."""

from __future__ import annotations

from duckengine.transform import Transform

MAX_COMPONENTS = 32

_type_ids: dict[type, int] = {}


def _component_type_id(component_type: type) -> int:
    type_id = _type_ids.get(component_type)
    if type_id is None:
        if len(_type_ids) >= MAX_COMPONENTS:
            raise ValueError(f"no more than {MAX_COMPONENTS} component types are supported")
        type_id = len(_type_ids)
        _type_ids[component_type] = type_id
    return type_id


class Component:
    """Behaviour attached to an entity; override the hooks that are needed.

    The base hooks keep simple bookkeeping of the component's life cycle.
    """

    entity: "Entity | None" = None
    enabled: bool = True
    initialized: bool = False
    destroyed: bool = False
    elapsed: float = 0.0
    frames_drawn: int = 0

    def init(self) -> None:
        """Called once when the component is added."""
        self.initialized = True

    def update(self, delta_time: float) -> None:
        """Called every frame while enabled; accumulates elapsed time."""
        self.elapsed += delta_time

    def draw(self) -> None:
        """Called every frame while enabled, after update; counts frames."""
        self.frames_drawn += 1

    def destroy(self) -> None:
        """Called when the owning entity is disposed of."""
        self.destroyed = True


class Entity:
    """A named object with a transform and at most one component per type."""

    def __init__(self, name="Entity") -> None:
        self.name = name
        self.transform = Transform()
        self._alive = True
        self._components: list[Component] = []
        self._by_type: dict[int, Component] = {}

    def alive(self) -> bool:
        """Whether the entity has not been marked for destruction."""
        return self._alive

    def destroy(self) -> None:
        """Mark the entity for removal from its scene."""
        self._alive = False

    def dispose(self) -> None:
        """Call destroy on every component."""
        for component in self._components:
            component.destroy()

    def update(self, delta_time: float) -> None:
        """Update every enabled component."""
        for component in self._components:
            if component.enabled:
                component.update(delta_time)

    def draw(self) -> None:
        """Draw every enabled component."""
        for component in self._components:
            if component.enabled:
                component.draw()

    def has_component(self, component_type: type) -> bool:
        """Whether a component of this type was added."""
        type_id = _type_ids.get(component_type)
        return type_id is not None and type_id in self._by_type

    def add_component(self, component_type: type, *args, **kwargs):
        """Create a component of the given type, attach it and initialise it."""
        if not (isinstance(component_type, type) and issubclass(component_type, Component)):
            raise TypeError(f"{component_type!r} is not a Component type")
        type_id = _component_type_id(component_type)
        component = component_type(*args, **kwargs)
        component.entity = self
        self._components.append(component)
        self._by_type[type_id] = component
        component.init()
        return component

    def get_component(self, component_type: type):
        """The component of this type, or None."""
        type_id = _type_ids.get(component_type)
        if type_id is None:
            return None
        return self._by_type.get(type_id)


class Scene:
    """Ordered collection of entities."""

    def __init__(self, name="Scene") -> None:
        self.name = name
        self._entities: list[Entity] = []

    def _remove_destroyed(self) -> None:
        kept = []
        for entity in self._entities:
            if entity.alive():
                kept.append(entity)
            else:
                entity.dispose()
        self._entities = kept

    def update(self, delta_time: float) -> None:
        """Update every entity."""
        for entity in self._entities:
            entity.update(delta_time)

    def draw(self) -> None:
        """Draw every entity, then drop the destroyed ones."""
        for entity in self._entities:
            entity.draw()
        self._remove_destroyed()

    def destroy(self) -> None:
        """Destroy and drop every entity."""
        for entity in self._entities:
            entity.destroy()
        self._remove_destroyed()

    def add_entity(self) -> Entity:
        """Create, add and return a new entity."""
        entity = Entity()
        self._entities.append(entity)
        return entity

    def __len__(self) -> int:
        return len(self._entities)
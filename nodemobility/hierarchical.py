"""A mobility model placing a child model relative to a moving parent."""

from __future__ import annotations

from nodemobility.geometry import Vector
from nodemobility.mobility_model import MobilityModel


class HierarchicalMobilityModel(MobilityModel):
    """Position of a child model expressed relative to a parent model.

    The reported position is always the sum of the parent and child
    positions, so when the parent moves this model moves with it. Setting
    the position uses absolute coordinates and only ever moves the child.
    Without a parent the child's coordinates are absolute.
    """

    def __init__(
        self,
        child: MobilityModel | None = None,
        parent: MobilityModel | None = None,
    ) -> None:
        super().__init__()
        self._child: MobilityModel | None = None
        self._parent: MobilityModel | None = None
        # The parent goes first so that the child keeps its relative position.
        if parent is not None:
            self.parent = parent
        if child is not None:
            self.child = child

    @property
    def child(self) -> MobilityModel | None:
        """The child model, positioned relative to the parent."""
        return self._child

    @child.setter
    def child(self, model: MobilityModel) -> None:
        if model is None:
            raise ValueError("the child model cannot be None")
        old_child = self._child
        if old_child is not None:
            absolute = self.position
            old_child.disconnect_course_change(self._child_changed)
        self._child = model
        model.connect_course_change(self._child_changed)
        # A previous child means a valid position existed; keep it.
        if old_child is not None:
            self.position = absolute

    @property
    def parent(self) -> MobilityModel | None:
        """The parent model whose position is the reference for the child."""
        return self._parent

    @parent.setter
    def parent(self, model: MobilityModel | None) -> None:
        absolute = self.position if self._child is not None else None
        if self._parent is not None:
            self._parent.disconnect_course_change(self._parent_changed)
        self._parent = model
        if model is not None:
            model.connect_course_change(self._parent_changed)
        if absolute is not None:
            self.position = absolute

    def _require_child(self) -> MobilityModel:
        if self._child is None:
            raise ValueError("no child mobility model has been set")
        return self._child

    def _get_position(self) -> Vector:
        child = self._require_child()
        if self._parent is None:
            return child.position
        return self._parent.position + child.position

    def _set_position(self, position: Vector) -> None:
        if self._child is None:
            return
        if self._parent is not None:
            self._child.position = position - self._parent.position
        else:
            self._child.position = position

    def _get_velocity(self) -> Vector:
        child = self._require_child()
        if self._parent is None:
            return child.velocity
        return self._parent.velocity + child.velocity

    def _parent_changed(self, model: MobilityModel) -> None:
        self.notify_course_change()

    def _child_changed(self, model: MobilityModel) -> None:
        self.notify_course_change()
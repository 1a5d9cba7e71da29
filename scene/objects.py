"""Oriented frames and the composite scene-graph node."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

from geometry.vector import Number, Vector

from .face import Face
from .view import FrameStats

if TYPE_CHECKING:  # pragma: no cover - import only needed for annotations
    from rendering.surface import DrawingSurface

    from .view import CameraView


class Object:
    """A position plus an orthonormal right/up/forward frame.

    The default frame is z-up: right is +x, forward is +y and up is +z.
    Translation moves ``center`` only; rotation turns the basis vectors only.
    """

    def __init__(
        self,
        center: Optional[Vector] = None,
        right: Optional[Vector] = None,
        up: Optional[Vector] = None,
        forward: Optional[Vector] = None,
    ) -> None:
        self.center = center.copy() if center is not None else Vector.zero()
        self.right = right.copy() if right is not None else Vector.basis(0)
        self.forward = forward.copy() if forward is not None else Vector.basis(1)
        self.up = up.copy() if up is not None else Vector.basis(2)

    def translate(self, other: Vector) -> None:
        self.center.translate(other)

    def rotate(self, axis: Vector, theta: float) -> None:
        # ``axis`` may be one of our own basis vectors, so freeze it first.
        axis = axis.copy()
        self.right.rotate(axis, theta)
        self.forward.rotate(axis, theta)
        self.up.rotate(axis, theta)

    def rotate_x(self, theta: float) -> None:
        self.rotate(Vector.basis(0), theta)

    def rotate_y(self, theta: float) -> None:
        self.rotate(Vector.basis(1), theta)

    def rotate_z(self, theta: float) -> None:
        self.rotate(Vector.basis(2), theta)


class RenderableObject(Object):
    """Scene-graph node owning faces and child nodes.

    ``center`` is the face/child count weighted blend of ``faces_center`` and
    ``children_center``. A node with neither keeps its own frame position.
    """

    def __init__(
        self,
        faces: Iterable[Face] = (),
        children: Iterable["RenderableObject"] = (),
        **frame: Vector,
    ) -> None:
        super().__init__(**frame)
        self.faces: List[Face] = []
        self.faces_center = Vector.zero()
        self.children: List[RenderableObject] = []
        self.children_center = Vector.zero()
        self.parent: Optional[RenderableObject] = None
        for face in faces:
            self.faces.append(face)
        for child in children:
            self._adopt(child)
        self.find_center()

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} faces={len(self.faces)} "
            f"children={len(self.children)} center={self.center}>"
        )

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------
    def add_face(self, face: Face) -> None:
        self.faces.append(face)
        self.find_center()

    def add_child(self, child: "RenderableObject") -> None:
        self._adopt(child)
        self.find_center()

    def iter_faces(self) -> Iterator[Face]:
        """Yield every face in the subtree, children first."""

        for child in self.children:
            yield from child.iter_faces()
        yield from self.faces

    def face_count(self) -> int:
        return sum(1 for _ in self.iter_faces())

    def find_faces_center(self) -> None:
        total = Vector.zero()
        for face in self.faces:
            total.translate(face.center)
        self.faces_center = total.scale(1.0 / len(self.faces))

    def find_children_center(self) -> None:
        total = Vector.zero()
        for child in self.children:
            total.translate(child.center)
        self.children_center = total.scale(1.0 / len(self.children))

    def find_center(self) -> None:
        face_count = len(self.faces)
        child_count = len(self.children)
        if face_count:
            self.find_faces_center()
        if child_count:
            self.find_children_center()
        total = face_count + child_count
        if total == 0:
            return
        weighted = self.faces_center.scale(face_count).add(
            self.children_center.scale(child_count)
        )
        self.center.assign(weighted.scale(1.0 / total))

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------
    def translate(self, other: Vector) -> None:
        if not self.faces and not self.children:
            super().translate(other)
            return
        for face in self.faces:
            face.translate(other)
        for child in self.children:
            child.translate(other)
        self.find_center()

    def scale(self, k: Number) -> None:
        """Scale the subtree uniformly about the world origin."""

        for face in self.faces:
            face.scale(k)
        for child in self.children:
            child_position = child.center.copy()
            child.translate(child_position.scale(-1))
            child.scale(k)
            child.translate(child_position.scale(k))
        self.find_center()

    def rotate(self, axis: Vector, theta: float) -> None:
        """Rigidly rotate the subtree about ``center``, then this node's own frame.

        Every face and child spins about its own center while that center
        orbits the node's aggregate pivot, so faces and children turn as one
        body.
        """

        axis = axis.copy()
        if self.faces or self.children:
            pivot = self.center.copy()
            self.translate(pivot.scale(-1))
            for face in self.faces:
                face.rotate(axis, theta)
                face_position = face.center.copy()
                face.translate(face_position.scale(-1))
                face_position.rotate(axis, theta)
                face.translate(face_position)
            for child in self.children:
                child.rotate(axis, theta)
                child_position = child.center.copy()
                child.translate(child_position.scale(-1))
                child_position.rotate(axis, theta)
                child.translate(child_position)
            self.translate(pivot)
        super().rotate(axis, theta)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def sorted_faces(self, view: "CameraView") -> List[Face]:
        """Faces ordered farthest first by camera-space depth of their centroid."""

        return sorted(self.faces, key=lambda face: view.depth(face.center), reverse=True)

    def sorted_children(self, view: "CameraView") -> List["RenderableObject"]:
        """Children ordered farthest first by camera-space distance."""

        return sorted(
            self.children, key=lambda child: view.distance(child.center), reverse=True
        )

    def render(
        self,
        view: "CameraView",
        surface: "DrawingSurface",
        viewport_extent: float,
        stats: Optional[FrameStats] = None,
    ) -> FrameStats:
        if stats is None:
            stats = FrameStats()
        for child in self.sorted_children(view):
            child.render(view, surface, viewport_extent, stats)
        self.render_faces(view, surface, viewport_extent, stats)
        return stats

    def render_faces(
        self,
        view: "CameraView",
        surface: "DrawingSurface",
        viewport_extent: float,
        stats: Optional[FrameStats] = None,
    ) -> FrameStats:
        if stats is None:
            stats = FrameStats()
        for face in self.sorted_faces(view):
            if view.depth(face.center) > 0:
                face.render(view, surface, viewport_extent)
                stats.drawn += 1
            else:
                stats.culled += 1
        return stats

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _adopt(self, child: "RenderableObject") -> None:
        """Attach ``child``, keeping the scene graph a tree with one owner per node."""

        node: Optional[RenderableObject] = self
        while node is not None:
            if node is child:
                raise ValueError("Adding this child would create a cycle in the scene tree")
            node = node.parent
        if child.parent is self:
            raise ValueError("Child is already attached to this node")
        if child.parent is not None:
            raise ValueError("Child is already attached to another node")
        child.parent = self
        self.children.append(child)

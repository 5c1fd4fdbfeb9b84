import pytest

from ckeditor_toolkit.core.plugins import (
    DEFAULT_GRAPH,
    MUTUALLY_EXCLUSIVE_GROUPS,
    CKEditorPlugin as P,
    DependencyCycleError,
    DependencyGraph,
    PluginDependencyError,
    dependencies_of,
    dependency_tree,
    dependents_of,
    has_dependencies,
    recommended_of,
    removal_impact,
)


class TestPointQueries:
    """Test direct lookups on the default dependency graph."""

    def test_dependencies_of(self):
        assert dependencies_of(P.IMAGE_CAPTION) == frozenset({P.IMAGE})
        assert dependencies_of(P.LINK_IMAGE) == frozenset({P.IMAGE, P.LINK})

    def test_dependencies_of_leaf_is_empty(self):
        assert dependencies_of(P.BOLD) == frozenset()
        assert not has_dependencies(P.BOLD)
        assert has_dependencies(P.TABLE_TOOLBAR)

    def test_recommended_of(self):
        assert recommended_of(P.TABLE) == frozenset(
            {P.TABLE_TOOLBAR, P.TABLE_PROPERTIES, P.TABLE_CELL_PROPERTIES}
        )
        assert recommended_of(P.BOLD) == frozenset()

    def test_dependents_of(self):
        dependents = dependents_of(P.TABLE)
        assert P.TABLE_TOOLBAR in dependents
        assert P.TABLE_CAPTION in dependents
        assert P.IMAGE_CAPTION not in dependents

    def test_removal_impact_limited_to_current(self):
        current = {P.IMAGE, P.IMAGE_CAPTION, P.IMAGE_TOOLBAR, P.TABLE}
        assert removal_impact(P.IMAGE, current) == frozenset({P.IMAGE_CAPTION, P.IMAGE_TOOLBAR})
        assert removal_impact(P.BOLD, current) == frozenset()

    def test_results_are_frozen(self):
        """Point queries return immutable sets."""
        assert isinstance(dependencies_of(P.EASY_IMAGE), frozenset)
        assert isinstance(recommended_of(P.IMAGE), frozenset)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_GRAPH.hard_dependencies[P.BOLD] = (P.ITALIC,)  # type: ignore[index]

    def test_editing_modes_are_exclusive_not_dependent(self):
        """The two editing modes exclude each other instead of depending."""
        assert ("StandardEditingMode", "RestrictedEditingMode") in MUTUALLY_EXCLUSIVE_GROUPS
        assert dependencies_of(P.STANDARD_EDITING_MODE) == frozenset()


class TestAcyclic:
    """Test cycle detection."""

    def test_default_graph_is_acyclic(self):
        DEFAULT_GRAPH.check_acyclic()

    def test_cycle_is_reported(self):
        graph = DependencyGraph({P.BOLD: (P.ITALIC,), P.ITALIC: (P.UNDERLINE,), P.UNDERLINE: (P.BOLD,)})
        with pytest.raises(DependencyCycleError) as exc_info:
            graph.check_acyclic()
        error = exc_info.value
        assert error.cycle[0] is error.cycle[-1]
        assert set(error.cycle) == {P.BOLD, P.ITALIC, P.UNDERLINE}
        assert "Dependency cycle detected" in str(error)
        assert isinstance(error, PluginDependencyError)

    def test_self_loop_is_a_cycle(self):
        graph = DependencyGraph({P.TABLE: (P.TABLE,)})
        with pytest.raises(DependencyCycleError) as exc_info:
            graph.check_acyclic()
        assert exc_info.value.cycle == [P.TABLE, P.TABLE]


class TestDependencyTree:
    """Test the ASCII dependency tree."""

    def test_leaf(self):
        assert dependency_tree(P.BOLD) == "└── Bold\n"

    def test_nested(self):
        expected = (
            "└── EasyImage\n"
            "    ├── CloudServices\n"
            "    │   └── CloudServicesCore\n"
            "    └── ImageUpload\n"
            "        └── Image\n"
        )
        assert dependency_tree(P.EASY_IMAGE) == expected

    def test_circular_marker(self):
        graph = DependencyGraph({P.BOLD: (P.ITALIC,), P.ITALIC: (P.BOLD,)})
        assert graph.dependency_tree(P.BOLD) == (
            "└── Bold\n"
            "    └── Italic\n"
            "        └── Bold (circular)\n"
        )

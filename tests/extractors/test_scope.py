"""Tests for scope marker resolution."""

from __future__ import annotations

from autocomponent.diagnostics import DiagnosticsCollector
from autocomponent.extractors.scope import SEVERAL_SCOPES_MESSAGE, ScopeResolver
from autocomponent.models import Declaration, TypeRef
from tests._fixtures.model_builder import ModelBuilder


def _resolver(builder: ModelBuilder, collector: DiagnosticsCollector, element: Declaration) -> ScopeResolver:
    return ScopeResolver(builder.model, collector.for_site(element))


def test_no_markers_means_unscoped(builder: ModelBuilder, collector: DiagnosticsCollector) -> None:
    element = builder.component("app.MainActivity")

    assert _resolver(builder, collector, element).resolve(element, element) is None
    assert collector.diagnostics == []


def test_non_scope_markers_are_ignored(builder: ModelBuilder, collector: DiagnosticsCollector) -> None:
    element = builder.component("app.MainActivity")
    builder.mark(element, TypeRef("app.Deprecated"))
    scope = builder.scope("app.ActivityScope")
    builder.mark(element, scope)

    marker = _resolver(builder, collector, element).resolve(element, element)

    assert marker is not None
    assert marker.type == scope
    assert marker.site == element


def test_first_of_two_scopes_wins_and_second_is_reported(
    builder: ModelBuilder, collector: DiagnosticsCollector
) -> None:
    element = builder.component("app.MainActivity")
    first = builder.scope("app.ActivityScope")
    second = builder.scope("app.Singleton")
    builder.mark(element, first)
    builder.mark(element, second)

    marker = _resolver(builder, collector, element).resolve(element, element)

    assert marker is not None and marker.type == first
    assert len(collector.errors) == 1
    assert collector.errors[0].message == SEVERAL_SCOPES_MESSAGE
    assert collector.errors[0].site == element


def test_every_extra_scope_is_reported(builder: ModelBuilder, collector: DiagnosticsCollector) -> None:
    element = builder.component("app.MainActivity")
    for name in ("app.A", "app.B", "app.C"):
        builder.mark(element, builder.scope(name))

    marker = _resolver(builder, collector, element).resolve(element, element)

    assert marker is not None and marker.type == TypeRef("app.A")
    assert len(collector.errors) == 2


def test_falls_back_to_component_element(builder: ModelBuilder, collector: DiagnosticsCollector) -> None:
    annotation = builder.annotation("app.ActivityComponent")
    activity = builder.apply(annotation, "app.MainActivity")
    scope = builder.scope("app.ActivityScope")
    builder.mark(activity, scope)

    marker = _resolver(builder, collector, annotation).resolve(annotation, activity)

    assert marker is not None
    assert marker.type == scope
    assert marker.site == activity
    assert collector.diagnostics == []


def test_annotation_scope_shadows_component_element(
    builder: ModelBuilder, collector: DiagnosticsCollector
) -> None:
    annotation = builder.annotation("app.ActivityComponent")
    activity = builder.apply(annotation, "app.MainActivity")
    on_annotation = builder.scope("app.ActivityScope")
    on_activity = builder.scope("app.Singleton")
    builder.mark(annotation, on_annotation)
    builder.mark(activity, on_activity)

    marker = _resolver(builder, collector, annotation).resolve(annotation, activity)

    assert marker is not None and marker.type == on_annotation
    assert collector.diagnostics == []


def test_duplicates_on_component_element_are_attributed_to_it(
    builder: ModelBuilder, collector: DiagnosticsCollector
) -> None:
    annotation = builder.annotation("app.ActivityComponent")
    activity = builder.apply(annotation, "app.MainActivity")
    builder.mark(activity, builder.scope("app.ActivityScope"))
    builder.mark(activity, builder.scope("app.Singleton"))

    marker = _resolver(builder, collector, annotation).resolve(annotation, activity)

    assert marker is not None and marker.type == TypeRef("app.ActivityScope")
    assert [entry.site for entry in collector.errors] == [activity]

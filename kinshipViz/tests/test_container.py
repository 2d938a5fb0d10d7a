import pytest

from kinlib.di import Container, container
from apps.lineage.visualization.graph_option import GraphOptionBuilder
from apps.lineage.visualization.lineage_mapper import LineageMapper


def test_lineage_services_registered():
    import apps.lineage.container  # noqa: F401

    builder = container.resolve('lineage.graph_option_builder')
    mapper = container.resolve('lineage.mapper')
    assert isinstance(builder, GraphOptionBuilder)
    assert isinstance(mapper, LineageMapper)
    assert mapper.option_builder is builder
    assert container.resolve('lineage.translator') is container.resolve('lineage.translator')


def test_unknown_key():
    with pytest.raises(KeyError):
        Container().resolve('missing')


def test_singleton_provider():
    c = Container()
    c.register('obj', object, singleton=True)
    c.register('fresh', object)
    assert c.resolve('obj') is c.resolve('obj')
    assert c.resolve('fresh') is not c.resolve('fresh')
    assert c.keys() == ['fresh', 'obj']
    assert c.has('obj') and not c.has('other')


def test_reregister_replaces_singleton():
    c = Container()
    c.register('obj', lambda: 'first', singleton=True)
    assert c.resolve('obj') == 'first'
    c.register('obj', lambda: 'second', singleton=True)
    assert c.resolve('obj') == 'second'

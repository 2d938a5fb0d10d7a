from kinlib.config import settings
from kinlib.di import container
from kinlib.i18n import get_translator

from .visualization.graph_option import GraphOptionBuilder
from .visualization.lineage_mapper import LineageMapper

_graph_option_builder = GraphOptionBuilder(
    translate=get_translator(settings.LOCALE),
    graph_settings=settings.GRAPH
)
_lineage_mapper = LineageMapper(option_builder=_graph_option_builder)

container.register('lineage.translator', lambda: get_translator(settings.LOCALE), singleton=True)
container.register('lineage.graph_option_builder', lambda: _graph_option_builder)
container.register('lineage.mapper', lambda: _lineage_mapper)

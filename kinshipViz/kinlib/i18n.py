"""
Localized strings for the lineage view.

Each catalog maps a fixed token to display text. Category tokens follow the
scheduler UI naming (KinshipState*); tooltip captions use KinshipTooltip*.
"""
import logging
from typing import Callable, Dict, Mapping, Optional

from .config import settings

logger = logging.getLogger(__name__)

Translator = Callable[[str], str]

CATALOGS: Dict[str, Dict[str, str]] = {
    "en_US": {
        "KinshipStateActive": "Current selection",
        "KinshipState1": "Online",
        "KinshipState0": "Workflow is not online",
        "KinshipState10": "Scheduling is not online",
        "KinshipTooltipName": "Workflow name",
        "KinshipTooltipStartTime": "Schedule start time",
        "KinshipTooltipEndTime": "Schedule end time",
        "KinshipTooltipCrontab": "Crontab",
        "KinshipTooltipPublishStatus": "Workflow publish status",
        "KinshipTooltipSchedulePublishStatus": "Schedule publish status",
    },
    "zh_CN": {
        "KinshipStateActive": "当前选择",
        "KinshipState1": "已上线",
        "KinshipState0": "工作流未上线",
        "KinshipState10": "调度未上线",
        "KinshipTooltipName": "工作流名字",
        "KinshipTooltipStartTime": "调度开始时间",
        "KinshipTooltipEndTime": "调度结束时间",
        "KinshipTooltipCrontab": "crontab表达式",
        "KinshipTooltipPublishStatus": "工作流发布状态",
        "KinshipTooltipSchedulePublishStatus": "调度发布状态",
    },
}


class UnknownLocaleError(KeyError):
    """Requested locale has no catalog."""
    pass


def mapping_translator(catalog: Mapping[str, str]) -> Translator:
    """Wrap a plain mapping; missing tokens fall back to the token itself."""
    def translate(key: str) -> str:
        if key in catalog:
            return catalog[key]
        logger.warning(f"Missing translation for '{key}'")
        return key
    return translate


def get_translator(locale: Optional[str] = None) -> Translator:
    """
    Get the lookup for a locale.

    Args:
        locale: Catalog name; defaults to the LOCALE setting

    Returns:
        Callable mapping a token to its display text

    Raises:
        UnknownLocaleError: If no catalog exists for the locale
    """
    locale = locale or settings.LOCALE
    if locale not in CATALOGS:
        raise UnknownLocaleError(f"no catalog for locale '{locale}' (have: {', '.join(sorted(CATALOGS))})")
    return mapping_translator(CATALOGS[locale])

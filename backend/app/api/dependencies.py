from fastapi import Depends

from ..core.config import Settings, get_settings
from ..core.llm import GeminiGateway


def get_gateway(settings: Settings = Depends(get_settings)) -> GeminiGateway:
    return GeminiGateway(settings)

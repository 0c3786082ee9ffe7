"""
Data Pipeline
Runs the default and per-call data providers and merges their output
into one view context
"""
import inspect
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from renderlayout import defaults
from renderlayout.config import RendererConfig
from renderlayout.exceptions import ProviderError
from renderlayout.logging import getLogger
from renderlayout.view.classifier import Internal, UserFacing, classify

logger = getLogger(__name__)

ProviderResult = Optional[Mapping[str, Any]]
DataProvider = Callable[[Any], Union[ProviderResult, Awaitable[ProviderResult]]]


def static_data(data: Mapping[str, Any]) -> DataProvider:
    """
    Provider that always returns the same data

    Example:
        render('about', static_data({'title': 'About us'}))
    """
    frozen = dict(data)

    def provider(_request) -> Dict[str, Any]:
        return dict(frozen)

    return provider


async def run_provider(provider: DataProvider, request) -> Tuple[Dict[str, Any], Optional[BaseException]]:
    """
    Call one provider, sync or async

    Returns:
        (data, error). Data attached to a ProviderError is returned alongside it.
    """
    try:
        result = provider(request)
        if inspect.isawaitable(result):
            result = await result
        data = dict(result or {})
    except ProviderError as e:
        return dict(e.data), e
    except Exception as e:
        return {}, e

    return data, None


class DataPipeline:
    """
    Assembles a fresh view context per request

    The default provider runs first and has the lowest precedence. Per-call
    providers run in order; later keys overwrite earlier ones. A failing
    provider never stops the ones after it, and its partial data is kept.

    Merge strategies:
        accumulate: user-facing messages are collected into a list at the
            error key. Internal failures are only logged.
        overwrite: every failure contributes a message (internal ones the
            generic error_message) and they are joined into a single string.

    In both strategies the error key is written last, so it wins over a
    data key with the same name.
    """

    def __init__(self, config: RendererConfig):
        self.config = config

    def providers_for(self, providers: Sequence[DataProvider]) -> List[Tuple[str, DataProvider]]:
        labelled = []
        if self.config.default_data is not None:
            labelled.append(('defaultData', self.config.default_data))
        for index, provider in enumerate(providers):
            labelled.append((f"data[{index}]", provider))
        return labelled

    async def build_view_context(self, request, providers: Sequence[DataProvider] = ()) -> Dict[str, Any]:
        """
        Run all providers and merge their output

        Args:
            request: Current request, passed to every provider
            providers: Per-call providers, in precedence order

        Returns:
            View context for this request only
        """
        view_data: Dict[str, Any] = {}
        messages: List[str] = []

        for label, provider in self.providers_for(providers):
            data, error = await run_provider(provider, request)
            message = self._classify(label, error)
            if message is not None:
                messages.append(message)
            view_data.update(data)

        if messages:
            if self.config.merge_strategy == defaults.MERGE_OVERWRITE:
                view_data[self.config.error_key] = defaults.DEFAULT_ERROR_SEPARATOR.join(messages)
            else:
                view_data[self.config.error_key] = messages

        return view_data

    def _classify(self, label: str, error: Optional[BaseException]) -> Optional[str]:
        """Log a provider failure and return the message to surface, if any"""
        classified = classify(error)
        if classified is None:
            return None

        if isinstance(classified, UserFacing):
            logger.info(f"user error => renderlayout:{label} => {error}")
            return classified.message

        if isinstance(classified, Internal):
            logger.error(
                f"internal error => renderlayout:{label} => {error!r}",
                exc_info=(type(error), error, error.__traceback__)
            )
            if self.config.merge_strategy == defaults.MERGE_OVERWRITE:
                return self.config.error_message

        return None

"""DomainClassifier: lifecycle, input validation, and fallback policy around the aggregator."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import replace
from typing import Any

from .classifiers import ClassificationLayer
from .config import apply_overrides, load_config, validate_config
from .core.hybrid import HybridClassifier, build_default_layers
from .types import (
    DEFAULT_DOMAIN,
    ClassificationResult,
    ClassifierConfig,
    HybridResult,
    LayerInfo,
)

logger = logging.getLogger(__name__)

# Enforced floor; ClassifierConfig.min_confidence is advisory only.
CONFIDENCE_FLOOR = 20
FALLBACK_CONFIDENCE = 50

NOT_INITIALIZED = "not initialized"
EMPTY_PROMPT = "empty prompt"
EXTREMELY_LOW_CONFIDENCE = "extremely low confidence"
CLASSIFICATION_ERROR = "classification error"


class DomainClassifier:
    """Classify prompts into code / writing / analysis / research.

    Usage::

        classifier = DomainClassifier({"maxProcessingTime": 10})
        await classifier.initialize()
        result = classifier.classify_domain("implement binary search algorithm")

    ``classify_domain`` never raises: every failure mode maps to a
    ClassificationResult with domain CODE.
    """

    def __init__(
        self,
        config: ClassifierConfig | dict[str, Any] | None = None,
        aggregator: HybridClassifier | None = None,
        config_path: str | None = None,
    ) -> None:
        if isinstance(config, ClassifierConfig):
            self._config = apply_overrides(config, {})
        elif config_path is not None:
            self._config = apply_overrides(load_config(config_path=config_path), config or {})
        else:
            self._config = apply_overrides(ClassifierConfig(), config or {})
        self._check(self._config)

        self._aggregator = aggregator or self._build_aggregator(self._config)
        self._initialized = False
        self._layer_tasks: set[asyncio.Task] = set()

    @staticmethod
    def _check(config: ClassifierConfig) -> None:
        errors = validate_config(config)
        if errors:
            raise ValueError("Invalid classifier config: " + "; ".join(errors))

    @staticmethod
    def _build_aggregator(config: ClassifierConfig) -> HybridClassifier:
        return HybridClassifier(
            layers=build_default_layers(config.layer_weights),
            domain_priority=config.domain_priority,
        )

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Prepare all layers. Calling again is a no-op."""
        if self._initialized:
            return
        await self._aggregator.initialize()
        self._initialized = True
        logger.debug("DomainClassifier initialized with layers %s", self.layer_info())

    def classify_domain(self, prompt: str | None) -> ClassificationResult:
        start = time.perf_counter()

        if not self._initialized:
            return self._fallback(FALLBACK_CONFIDENCE, NOT_INITIALIZED, start)

        if not isinstance(prompt, str) or not prompt.strip():
            return self._fallback(FALLBACK_CONFIDENCE, EMPTY_PROMPT, start)

        try:
            result = self._aggregator.classify(prompt)
        except Exception as e:
            logger.warning("Hybrid classification failed, using fallback: %s", e)
            return self._fallback(FALLBACK_CONFIDENCE, CLASSIFICATION_ERROR, start)

        if result.processing_time > self._config.max_processing_time:
            logger.warning(
                "Domain classification exceeded %dms: %.2fms",
                self._config.max_processing_time, result.processing_time,
            )
        if self._config.enable_performance_logging:
            logger.info(
                "Classified as %s (%d) in %.2fms",
                result.domain.value, result.confidence, result.processing_time,
            )

        if result.confidence < CONFIDENCE_FLOOR:
            return self._fallback(CONFIDENCE_FLOOR, EXTREMELY_LOW_CONFIDENCE, start)

        return result.to_result()

    def explain(self, prompt: str) -> HybridResult:
        """Return the aggregator result with every layer score, bypassing fallbacks."""
        if not self._initialized:
            raise RuntimeError("DomainClassifier not initialized. Call initialize() first.")
        return self._aggregator.classify(prompt)

    def layer_info(self) -> list[LayerInfo]:
        return self._aggregator.layer_info()

    @property
    def config(self) -> ClassifierConfig:
        """A copy of the active configuration."""
        return replace(
            self._config,
            layer_weights=dict(self._config.layer_weights),
            domain_priority=list(self._config.domain_priority),
        )

    def update_config(self, **overrides: Any) -> None:
        """Apply option overrides. Weight and priority changes apply to the running aggregator."""
        updated = apply_overrides(self._config, overrides)
        self._check(updated)
        changed = (
            updated.layer_weights != self._config.layer_weights
            or updated.domain_priority != self._config.domain_priority
        )
        self._config = updated
        if changed:
            added = self._aggregator.reconfigure(updated.layer_weights, updated.domain_priority)
            if added and self._initialized:
                self._initialize_layers(added)

    def _initialize_layers(self, layers: list[ClassificationLayer]) -> None:
        """Initialize layers added after startup, on the running loop when there is one."""
        async def _run() -> None:
            for layer in layers:
                await layer.initialize()

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(_run())
            return

        task = loop.create_task(_run())
        self._layer_tasks.add(task)
        task.add_done_callback(self._on_layers_initialized)

    def _on_layers_initialized(self, task: asyncio.Task) -> None:
        self._layer_tasks.discard(task)
        exc = task.exception() if not task.cancelled() else None
        if exc:
            logger.error("Layer initialization failed: %s", exc, exc_info=exc)

    @staticmethod
    def _fallback(confidence: int, indicator: str, start: float) -> ClassificationResult:
        return ClassificationResult(
            domain=DEFAULT_DOMAIN,
            confidence=confidence,
            indicators=(indicator,),
            processing_time=round((time.perf_counter() - start) * 1000, 2),
        )

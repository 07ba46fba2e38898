"""High-level entry points: build a pipeline from configuration and lint.

Each document gets its own pass and its own message aggregator, so
lint_files() can share one pipeline between worker threads.
"""

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .config.models import LintConfig
from .exceptions import ConfigurationError, ProcessingError, UnknownRuleError
from .lint_logging import get_logger, setup_logging
from .messages import LintFile
from .outcome import ConfigurationFailure, LintOutcome, ProcessingFailure
from .pipeline import LintPipeline
from .rules.registry import RuleRegistry, default_registry

logger = get_logger("linter")


def create_pipeline(
    config: LintConfig | None = None,
    registry: RuleRegistry | None = None,
) -> LintPipeline:
    """Create a pipeline with every configured rule attached.

    A configuration passed in also sets up package logging from its
    ``logging`` section.

    Args:
        config: Lint configuration. Defaults to an empty configuration.
        registry: Rule registry. Defaults to the builtin rules.

    Returns:
        Configured LintPipeline

    Raises:
        ConfigurationError: If a rule is unknown or misconfigured
    """
    if config is None:
        config = LintConfig()
    else:
        setup_logging(config.logging)
    if registry is None:
        registry = default_registry()

    pipeline = LintPipeline(message_control=config.message_control)
    pipeline.with_settings(config.settings.model_dump())

    for rule_id, value in config.rules.items():
        rule = registry.get_rule(rule_id)
        if rule is None:
            raise UnknownRuleError(rule_id)
        pipeline.use(rule, value)

    logger.debug(f"Created pipeline with {len(pipeline.attached)} rule(s)")
    return pipeline


def lint_text(
    text: str,
    config: LintConfig | None = None,
    path: str | None = None,
    registry: RuleRegistry | None = None,
) -> LintOutcome:
    """Lint a single document.

    Configuration errors are returned as ConfigurationFailure rather
    than raised.
    """
    try:
        pipeline = create_pipeline(config, registry)
    except ConfigurationError as e:
        return ConfigurationFailure(e)
    return pipeline.process(LintFile(contents=text, path=path))


def _lint_path(pipeline: LintPipeline, path: Path) -> LintOutcome:
    try:
        file = LintFile.from_path(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {path}: {e}")
        error = ProcessingError(f"Cannot read {path}: {e}")
        error.__cause__ = e
        return ProcessingFailure(error, str(path))
    return pipeline.process(file)


def lint_files(
    paths: Iterable[Path | str],
    config: LintConfig | None = None,
    registry: RuleRegistry | None = None,
) -> dict[Path, LintOutcome]:
    """Lint several files in parallel.

    Returns:
        Outcome per path, in input order. A configuration error yields a
        ConfigurationFailure for every path.
    """
    paths = [Path(p) for p in paths]
    max_workers = (config or LintConfig()).max_workers

    try:
        pipeline = create_pipeline(config, registry)
    except ConfigurationError as e:
        return {path: ConfigurationFailure(e) for path in paths}

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        outcomes = list(executor.map(lambda p: _lint_path(pipeline, p), paths))

    failed = sum(1 for outcome in outcomes if not outcome.ok)
    logger.info(f"Linted {len(paths)} file(s), {failed} failed")
    return dict(zip(paths, outcomes, strict=True))


__all__ = ["create_pipeline", "lint_files", "lint_text"]

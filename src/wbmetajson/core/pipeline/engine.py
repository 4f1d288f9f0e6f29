from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates one generation run against a completed build:
1. Materializes local icons and rewrites their references.
2. Indexes the folder annotations.
3. Rebuilds the directory tree from the artifact collection.
4. Renders one meta.json document per directory.
5. Removes the previous icons directory, then injects documents, icons and
   the README into the artifact collection.

The run is synchronous; the build is blocked until it returns.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from wbmetajson.core.analysis.folder_index import build_folder_index
from wbmetajson.core.analysis.meta_generator import generate_meta_documents, meta_output_path
from wbmetajson.core.analysis.tree_builder import build_directory_tree
from wbmetajson.core.pipeline.validator import validate_config
from wbmetajson.core.services.icons import clean_icons_output, materialize_icons
from wbmetajson.core.services.readme import load_readme
from wbmetajson.domain.asset_models import Compilation
from wbmetajson.domain.config import GeneratorConfig
from wbmetajson.domain.errors import GenerationError
from wbmetajson.domain.pipeline_models import (
    GenerationResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_pipeline(
        cfg: GeneratorConfig,
        compilation: Compilation,
        *,
        dry_run: bool = False,
        token_factory: Optional[Callable[[], str]] = None,
) -> GenerationResult:
    """
    Execute one generation run.

    Args:
        cfg: Validated generator configuration.
        compilation: The completed build; its asset collection is extended.
        dry_run: If True, nothing is added to the compilation and the previous
                 icons directory is left on disk.
        token_factory: Source of unique icon tokens (uuid4 by default).

    Returns:
        GenerationResult: Status, rendered documents and statistics.
    """
    logger.info(f"Generating meta documents for package '{cfg.package}' ({cfg.environment}).")

    # -------------------------------------------------------------------------
    # 1) Boundary reads (icons, README)
    # -------------------------------------------------------------------------
    try:
        run_cfg, icons = materialize_icons(cfg, compilation.context, token_factory)
        readme = load_readme(compilation.context, cfg.readme_file) if cfg.readme_file else None
    except OSError as e:
        msg = f"Failed to read a referenced local file: {e}"
        logger.error(msg)
        return create_error_result(msg, cfg)

    # -------------------------------------------------------------------------
    # 2) Tree reconstruction & document rendering
    # -------------------------------------------------------------------------
    skipped: List[str] = []
    root = build_directory_tree(
        compilation.assets,
        build_folder_index(run_cfg.folder_description_list),
        run_cfg.environment,
        package_description=run_cfg.package_description,
        package_icon=run_cfg.package_icon,
        package_default_action=run_cfg.package_default_action,
        sites=run_cfg.sites,
        skipped=skipped,
    )
    documents = generate_meta_documents(root, run_cfg.package)

    summary: Dict[str, Any] = {
        "dry_run": dry_run,
        "directories": len(documents),
        "files": sum(len(node.files) for node in root.iter_nodes()),
        "skipped": len(skipped),
        "icons": len(icons),
    }

    if dry_run:
        logger.info("Dry run: build output left untouched.")
        return create_success_result(
            run_cfg, documents,
            icon_files=[icon.path for icon in icons],
            readme_path=readme[0] if readme else "",
            skipped_files=skipped,
            summary_extra=summary,
        )

    # -------------------------------------------------------------------------
    # 3) Injection into the build output
    # -------------------------------------------------------------------------
    try:
        clean_icons_output(compilation.context, run_cfg.output_dir)
    except OSError as e:
        msg = f"Failed to remove the previous icons directory: {e}"
        logger.error(msg)
        return create_error_result(msg, run_cfg, summary_extra=summary)

    for info in documents:
        compilation.add_asset(meta_output_path(info.path), info.content)

    for icon in icons:
        compilation.add_asset(icon.path, icon.content)

    if readme:
        compilation.add_asset(readme[0], readme[1])

    logger.info(
        f"Generated {summary['directories']} meta documents "
        f"({summary['files']} files, {summary['skipped']} skipped, {summary['icons']} icons)."
    )

    return create_success_result(
        run_cfg, documents,
        icon_files=[icon.path for icon in icons],
        readme_path=readme[0] if readme else "",
        skipped_files=skipped,
        summary_extra=summary,
    )


class MetaJsonGenerator:
    """
    Build tool integration point.

    Options are validated when the generator is constructed; a shape error
    raises ConfigurationError before any build work happens.
    """

    def __init__(self, options: Mapping[str, Any], *, strict: bool = True):
        self.config, self.warnings = validate_config(options, strict=strict)

    def run(self, compilation: Compilation, *, dry_run: bool = False) -> GenerationResult:
        return run_pipeline(self.config, compilation, dry_run=dry_run)

    def emit(self, compilation: Compilation) -> GenerationResult:
        """
        Run against a completed build and fail the build on error.

        Raises:
            GenerationError: If the run did not succeed.
        """
        result = self.run(compilation)
        if not result.ok:
            raise GenerationError(result.error)
        return result

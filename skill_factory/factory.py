"""Skill Factory - turn a raw skill request into a generation manifest.

Main flow for each request:
1. Sanitize free-text fields
2. Validate -> SkillRequest (reject on first failure)
3. Path guard on the output directory
4. Permission resolution + dangerous combination advisories
5. Template selection
6. Artifact planning
7. Contract check on the assembled manifest
8. Audit log all events

Either a complete manifest is returned or an error is raised; nothing is
written to disk except the optional audit log.
"""

import argparse
import json
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .audit import AuditLogger
from .errors import SkillRequestError
from .models.manifest import GenerationManifest, SkillDefinition, StructureSummary, ToolConfig
from .models.request import OUTPUT_FORMATS
from .permissions.catalog import KNOWN_TOOLS
from .permissions.resolver import check_combinations, resolve_permissions, risk_level
from .planner import next_steps, plan_artifacts
from .security.path_guard import PathGuard
from .security.sanitizer import sanitize
from .templates.selector import resolve_skill_type, select_template
from .validators.manifest import validate_manifest
from .validators.request import validate_request

DEFAULT_OUTPUT_DIR = "output"


class SkillFactory:
    """Validate skill requests and plan their packages."""

    def __init__(
        self,
        output_dir: str = DEFAULT_OUTPUT_DIR,
        audit_log_path: Path | None = None,
        *,
        block_dangerous_combinations: bool = False,
    ) -> None:
        self.output_dir = output_dir
        self.audit = AuditLogger(audit_log_path) if audit_log_path else None
        self.block_dangerous_combinations = block_dangerous_combinations
        self._guard = PathGuard()

    def _log(self, operation: str, **kwargs: Any) -> None:
        if self.audit:
            self.audit.log(operation, **kwargs)

    def generate(self, request: Any, output_dir: str | None = None) -> GenerationManifest:
        """
        Run the full pipeline for one raw request.

        Args:
            request: Raw request mapping (e.g. decoded JSON).
            output_dir: Destination override; defaults to the factory's output_dir.

        Returns:
            The frozen GenerationManifest.

        Raises:
            SkillRequestError: If the request or destination is rejected.
            RuntimeError: If the assembled manifest breaks its own contract.
        """
        raw_name = request.get("skill_name") if isinstance(request, Mapping) else None
        self._log("GENERATE", skill=raw_name if isinstance(raw_name, str) else None)

        try:
            manifest = self._build(request, self.output_dir if output_dir is None else output_dir)
        except SkillRequestError as e:
            self._log("REJECT", kind=e.kind, field=e.field, error=e.message)
            raise

        summary = manifest.structure_summary
        self._log(
            "MANIFEST",
            skill=manifest.skill_definition.name,
            template=manifest.skill_definition.template,
            format=summary.format,
            files=summary.file_count,
        )
        return manifest

    def _build(self, request: Any, output_dir: Any) -> GenerationManifest:
        skill_request = validate_request(sanitize(request))
        destination = self._guard.check(output_dir)

        tools = skill_request.tools_needed
        permissions = resolve_permissions(tools)
        advisories = check_combinations(tools, block=self.block_dangerous_combinations)
        for advisory in advisories:
            self._log("ADVISORY", skill=skill_request.skill_name, message=advisory)

        template = select_template(skill_request.skill_type, skill_request.primary_function)
        artifacts = plan_artifacts(template, skill_request.skill_name, skill_request.output_format)
        summary = StructureSummary.from_artifacts(
            skill_request.output_format, skill_request.skill_name, artifacts
        )

        manifest = GenerationManifest(
            skill_definition=SkillDefinition(
                name=skill_request.skill_name,
                type=resolve_skill_type(skill_request.skill_type, template),
                description=skill_request.description,
                primary_function=skill_request.primary_function,
                template=template,
                output_format=skill_request.output_format,
                use_cases=skill_request.use_cases,
            ),
            tools=ToolConfig(
                tools=tools,
                permissions=permissions,
                risk_level=risk_level(tools),
                advisories=tuple(advisories),
            ),
            artifacts=artifacts,
            output_dir=destination,
            next_steps=next_steps(artifacts, summary.has_tests),
        )

        ok, errors = validate_manifest(manifest.model_dump(mode="json"))
        if not ok:
            raise RuntimeError("Manifest validation failed: " + "; ".join(errors))
        return manifest


def generate_manifest(
    request: Any,
    output_dir: str = DEFAULT_OUTPUT_DIR,
    *,
    block_dangerous_combinations: bool = False,
) -> GenerationManifest:
    """Plan a skill package without audit logging."""
    factory = SkillFactory(output_dir, block_dangerous_combinations=block_dangerous_combinations)
    return factory.generate(request)


def load_request(request_path: Path) -> dict:
    """Load a raw request from a JSON file.

    Raises:
        json.JSONDecodeError: If the file is not valid JSON.
    """
    with open(request_path) as f:
        return json.load(f)


def save_manifest(manifest_path: Path, manifest: GenerationManifest) -> None:
    """Save a manifest as indented JSON, creating parent directories."""
    manifest_path.parent.mkdir(parents=True, exist_ok=True)
    with open(manifest_path, "w") as f:
        json.dump(manifest.model_dump(mode="json"), f, indent=2)


def request_from_args(args: argparse.Namespace) -> dict:
    """Build a raw request from CLI flags, leaving out flags that were not given."""
    fields = {
        "skill_name": args.name,
        "description": args.description,
        "primary_function": args.function,
        "skill_type": args.type,
        "tools_needed": args.tool,
        "use_cases": args.use_case,
        "output_format": args.format,
    }
    return {key: value for key, value in fields.items() if value is not None}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Skill Factory - validate a skill request and plan its package"
    )
    parser.add_argument("--request", help="Path to a JSON request file (overrides field flags)")
    parser.add_argument("--name", help="Skill name (lowercase letters, digits, hyphens)")
    parser.add_argument("--description", help="Skill description")
    parser.add_argument("--function", help="Primary function of the skill")
    parser.add_argument("--type", help="Skill type (e.g. coordinator, specialist)")
    parser.add_argument(
        "--tool",
        action="append",
        help=f"Tool to grant, repeatable ({', '.join(KNOWN_TOOLS)})",
    )
    parser.add_argument("--use-case", action="append", help="Use case, repeatable")
    parser.add_argument("--format", help=f"Output format ({', '.join(OUTPUT_FORMATS)})")
    parser.add_argument(
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Destination directory for the package (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument("--audit-log", help="Path to audit log file (optional)")
    parser.add_argument(
        "--block-dangerous",
        action="store_true",
        help="Reject dangerous tool combinations instead of reporting them",
    )
    parser.add_argument("--out", help="Write the manifest JSON to this path")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the skill factory."""
    args = build_parser().parse_args(argv)

    if args.request:
        try:
            request = load_request(Path(args.request))
        except (OSError, json.JSONDecodeError) as e:
            print(f"Cannot read request file {args.request}: {e}", file=sys.stderr)
            sys.exit(2)
    else:
        request = request_from_args(args)

    factory = SkillFactory(
        output_dir=args.output_dir,
        audit_log_path=Path(args.audit_log) if args.audit_log else None,
        block_dangerous_combinations=args.block_dangerous,
    )

    try:
        manifest = factory.generate(request)
    except SkillRequestError as e:
        print(f"Request rejected [{e.kind}]: {e.message}", file=sys.stderr)
        sys.exit(1)

    if not args.out:
        print(json.dumps(manifest.model_dump(mode="json"), indent=2))
        return

    save_manifest(Path(args.out), manifest)

    definition = manifest.skill_definition
    summary = manifest.structure_summary
    print("Skill Factory plan ready:")
    print(f"  Skill:    {definition.name} ({definition.type}, {definition.template})")
    print(f"  Format:   {summary.format} ({summary.file_count} files)")
    print(f"  Risk:     {manifest.tools.risk_level}")
    for advisory in manifest.tools.advisories:
        print(f"  Advisory: {advisory}")
    print(f"  Manifest: {args.out}")


if __name__ == "__main__":
    main()

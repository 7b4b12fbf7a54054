#!/usr/bin/env python3
"""
simplet4 - T4-style template transformer

Compiles a text template (literal text mixed with <#@ #>, <# #>, <#= #> and
<#+ #> blocks) into an intermediate C# program. Compiling and running that
program writes the rendered output next to the template.

Usage:
    simplet4 <InputTt> <OutputCs>

Examples:
    # Basic transformation
    simplet4 Report.tt Report.cs

    # Show directive diagnostics and block trace
    simplet4 Report.tt Report.cs -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from .lib import Engine, TransformError, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


parser = ArgumentParser(
    prog="simplet4",
    description="simplet4 - compile a text template into a generator program",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument("templateFile", metavar="InputTt", type=str, help="Template (.tt) to transform")

parser.add_argument(
    "programFile", metavar="OutputCs", type=str, help="Generated program (.cs) to write"
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate the input template and resolve both paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - templatePath: Template path
            - programPath: Generated program path
            - envOK: True if environment is valid

    Exits:
        1 if the template does not exist or the program directory is missing
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    state.templatePath = Path(state.templateFile)
    if not state.templatePath.is_file():
        print(f"Error: Template not found: {state.templatePath}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.programPath = Path(state.programFile)
    program_dir = state.programPath.parent
    if not program_dir.is_dir():
        print(f"Error: Output directory not found: {program_dir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    LOG(f"Template: {state.templatePath}", level=2)
    LOG(f"Program: {state.programPath}", level=2)

    state.envOK = True
    return state


def template_transform(inputstate: ProgramState) -> ProgramState:
    """
    Transform the template into the generated program.

    Args:
        inputstate: Program state with templatePath and programPath

    Returns:
        ProgramState with added field:
            - transformResult: summary dict from Engine.transform()

    Exits:
        1 on any transformation error (no program file is written)
    """
    state = inputstate.copy()

    LOG(
        f"Transforming template '{state.templateFile}' to intermediate "
        f"assembly '{state.programFile}'...",
        level=1,
    )

    try:
        engine = Engine(state.templateFile, state.programFile)
        state.transformResult = engine.transform()
    except TransformError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display the transformation summary.

    Args:
        inputstate: Program state with transformResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state: ProgramState = inputstate.copy()
    if not state.transformResult:
        print("Error: Transformation failed", file=sys.stderr)
        sys.exit(1)

    LOG("Transformation completed.", level=1)
    LOG(f"  Program: {state.transformResult['program_file']}", level=2)
    LOG(f"  Renders to: {state.transformResult['output_file']}", level=2)
    LOG(
        f"  Fragments: {state.transformResult['script_fragments']} script, "
        f"{state.transformResult['class_fragments']} class feature",
        level=2,
    )
    return state


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - transform a template into a generator program.

    Orchestrates the pipeline:
        1. env_check: Validate paths
        2. template_transform: Scan the template and write the program
        3. results_report: Display results

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        0 on success; errors exit through sys.exit
    """
    options: Namespace = parser.parse_args(argv)
    state: ProgramState = ProgramState.state_createFromNamespace(options)

    state_connectToLogger(state)

    pipeline(state, env_check, template_transform, results_report)
    return 0


if __name__ == "__main__":
    sys.exit(main())

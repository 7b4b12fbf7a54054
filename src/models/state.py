"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the CLI pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the transformation progresses.

    Pipeline stages and their state additions:
        - Initial: templateFile, programFile, verbosity
        - env_check: templatePath, programPath, envOK
        - template_transform: transformResult
        - results_report: (no additions, terminal stage)

    Attributes:
        templateFile: Template (.tt) path as given on the command line
        programFile: Generated program (.cs) path as given on the command line
        verbosity: Logging verbosity level (1-3)
        envOK: Environment validation passed
        templatePath: Resolved template path
        programPath: Resolved generated program path
        transformResult: Transformation summary (program_file, output_file,
                         usings, script_fragments, class_fragments)
    """

    # CLI arguments
    templateFile: str = field(default="")
    programFile: str = field(default="")
    verbosity: int = field(default=1)

    # Pipeline state
    envOK: bool = field(default=False)
    templatePath: Path = field(default=Path("/"))
    programPath: Path = field(default=Path("/"))
    transformResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace
    ) -> "ProgramState":
        """
        Create ProgramState from an argparse Namespace.

        Unknown namespace attributes are dropped so the parser may carry
        options the pipeline does not track.

        Args:
            options: Parsed CLI arguments (templateFile, programFile, ...)

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}

        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            template_transform,
            results_report
        )

    This is equivalent to:
        results_report(template_transform(env_check(initial_state)))

    But reads left-to-right instead of inside-out.
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)

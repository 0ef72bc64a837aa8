"""Pass-through test generation for wrapper objects."""

from passthrough_helper.frameworks import (
    FunctionTestingFramework,
    MissingMockCreatorMethodError,
    MockCapability,
    TestingFramework,
    UnittestMockFramework,
)
from passthrough_helper.helper import (
    DidNotReturnPassThroughValueError,
    get_method_infos,
    pass_through_helper,
)
from passthrough_helper.method_extractor import get_pass_through_method_infos
from passthrough_helper.mock_generator import generate_mock
from passthrough_helper.models import (
    GeneratedMock,
    MethodInfo,
    PassThroughHelperError,
    PassThroughTest,
    PositionalArgument,
    ReturnSentinel,
    SourceFile,
    TypeInfo,
)
from passthrough_helper.source import create_source_file_from_path
from passthrough_helper.type_finder import (
    TypeNotFoundError,
    conditional_type_finder,
    first_type_finder,
    type_by_name_finder,
)

__all__ = [
    # Models
    "MethodInfo",
    "TypeInfo",
    "SourceFile",
    "GeneratedMock",
    "PassThroughTest",
    "PositionalArgument",
    "ReturnSentinel",
    # Errors
    "PassThroughHelperError",
    "TypeNotFoundError",
    "MissingMockCreatorMethodError",
    "DidNotReturnPassThroughValueError",
    # Source and type lookup
    "create_source_file_from_path",
    "conditional_type_finder",
    "first_type_finder",
    "type_by_name_finder",
    # Extraction and mocks
    "get_pass_through_method_infos",
    "get_method_infos",
    "generate_mock",
    # Testing frameworks
    "MockCapability",
    "TestingFramework",
    "FunctionTestingFramework",
    "UnittestMockFramework",
    # Test generation
    "pass_through_helper",
]

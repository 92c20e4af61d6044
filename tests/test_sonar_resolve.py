import unittest
from typing import Any, Dict

from sonar_review.diagnostics import RecordingDiagnostics
from sonar_review.domain import Severity, Violation
from tools.sonar.components import build_component_index
from tools.sonar.errors import ComponentResolutionError, ReportFieldError
from tools.sonar.resolve import (
    ALREADY_INDEXED,
    NO_LINE,
    Filtered,
    classify_issue,
    resolve_issue_file_path,
)
from tools.sonar.types import SonarIssue


INDEX = build_component_index(
    [
        {"key": "proj", "name": "Project"},
        {"key": "mod", "path": "src/module1", "moduleKey": "proj"},
        {"key": "mod:file", "path": "dir/file.cs", "moduleKey": "mod"},
        {"key": "plain", "path": "dir/plain.cs"},
        {"key": "empty-module", "path": "dir/empty.cs", "moduleKey": ""},
        {"key": "dangling", "path": "dir/dangling.cs", "moduleKey": "missing"},
        {"key": "nested:mod", "path": "nested", "moduleKey": "mod"},
        {"key": "nested:file", "path": "x.cs", "moduleKey": "nested:mod"},
        {"key": "self", "path": "self", "moduleKey": "self"},
    ]
)


def _issue(**overrides: Any) -> SonarIssue:
    raw: Dict[str, Any] = {
        "component": "plain",
        "line": 7,
        "message": "Remove this unused import.",
        "severity": "MAJOR",
        "isNew": True,
    }
    raw.update(overrides)
    return SonarIssue.from_dict({k: v for k, v in raw.items() if v is not ...})


class TestResolveIssueFilePath(unittest.TestCase):
    def test_component_without_module(self) -> None:
        self.assertEqual("dir/plain.cs", resolve_issue_file_path("plain", INDEX))

    def test_empty_module_key_is_ignored(self) -> None:
        self.assertEqual("dir/empty.cs", resolve_issue_file_path("empty-module", INDEX))

    def test_component_with_module_is_prefixed(self) -> None:
        self.assertEqual("src/module1/dir/file.cs", resolve_issue_file_path("mod:file", INDEX))

    def test_only_one_module_level_is_followed(self) -> None:
        self.assertEqual("nested/x.cs", resolve_issue_file_path("nested:file", INDEX))

    def test_self_referencing_module(self) -> None:
        self.assertEqual("self/self", resolve_issue_file_path("self", INDEX))

    def test_unknown_component_key(self) -> None:
        with self.assertRaises(ComponentResolutionError) as cm:
            resolve_issue_file_path("nope", INDEX)
        self.assertEqual("nope", cm.exception.key)
        self.assertEqual("component", cm.exception.role)

    def test_unknown_module_key(self) -> None:
        with self.assertRaises(ComponentResolutionError) as cm:
            resolve_issue_file_path("dangling", INDEX)
        self.assertEqual("missing", cm.exception.key)
        self.assertEqual("module", cm.exception.role)


class TestClassifyIssue(unittest.TestCase):
    def test_new_issue_with_line_becomes_violation(self) -> None:
        out = classify_issue(_issue(component="mod:file", severity="MINOR"), INDEX)
        self.assertEqual(
            Violation("src/module1/dir/file.cs", 7, "Remove this unused import.", Severity.WARNING),
            out,
        )

    def test_old_issue_is_filtered(self) -> None:
        out = classify_issue(_issue(isNew=False), INDEX)
        self.assertIsInstance(out, Filtered)
        self.assertEqual(ALREADY_INDEXED, out.reason)
        self.assertTrue(out.describe().startswith("Skipping already indexed issue"))

    def test_issue_without_line_is_filtered(self) -> None:
        for issue in (_issue(line=...), _issue(line=None)):
            out = classify_issue(issue, INDEX)
            self.assertIsInstance(out, Filtered)
            self.assertEqual(NO_LINE, out.reason)
            self.assertTrue(out.describe().startswith("Skipping an issue with no line information"))

    def test_already_indexed_wins_over_missing_line(self) -> None:
        out = classify_issue(_issue(isNew=False, line=...), INDEX)
        self.assertEqual(ALREADY_INDEXED, out.reason)

    def test_filtered_issue_is_not_resolved(self) -> None:
        out = classify_issue(_issue(isNew=False, component="nope", message=...), INDEX)
        self.assertIsInstance(out, Filtered)

    def test_unknown_component_fails(self) -> None:
        with self.assertRaises(ComponentResolutionError):
            classify_issue(_issue(component="nope"), INDEX)

    def test_missing_message_fails(self) -> None:
        with self.assertRaises(ReportFieldError):
            classify_issue(_issue(message=...), INDEX)

    def test_unknown_severity_reported_through_sink(self) -> None:
        diag = RecordingDiagnostics()
        out = classify_issue(_issue(severity="SEVERE"), INDEX, diag)
        self.assertEqual(Severity.WARNING, out.severity)
        self.assertEqual(["Unknown severity: SEVERE"], diag.messages("warning"))


class TestSonarIssueFields(unittest.TestCase):
    def test_is_new_is_required(self) -> None:
        with self.assertRaises(ReportFieldError):
            _issue(isNew=...)

    def test_is_new_must_be_boolean(self) -> None:
        with self.assertRaises(ReportFieldError):
            _issue(isNew="true")

    def test_line_must_be_integer(self) -> None:
        for bad in ("12", 1.5, True):
            with self.assertRaises(ReportFieldError, msg=repr(bad)):
                _issue(line=bad)


if __name__ == "__main__":
    unittest.main()

"""Abstraction-level separation.

Files that carry business vocabulary (entity nouns or business verbs)
should not also talk SQL, HTTP, file I/O or serialization directly. Each
check is an ``AbstractionRule`` in ``ABSTRACTION_RULES``; a rule decides
from the file's layer whether it applies and how severe it is, and fires
at most once per file.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable, Optional

from ..logging_config import get_logger
from ..scanning.models import Layer, SourceFile
from ..scoring.calculator import abstraction_score, level_for
from ..scoring.models import AbstractionResult, Dimension
from .models import AbstractionFinding, AbstractionIssue, CodeExample, Severity

logger = get_logger(__name__)

BUSINESS_NOUNS = re.compile(
    r"\b(Order|Product|Customer|Invoice|Payment|Account|User)\b", re.IGNORECASE
)
BUSINESS_VERBS = re.compile(
    r"\b(Calculate|Process|Validate|Create|Update|Delete)\b", re.IGNORECASE
)

_INNER_LAYERS = (Layer.DOMAIN, Layer.APPLICATION)


@dataclass(frozen=True)
class AbstractionRule:
    """One technical-concern check.

    Attributes:
        issue: Issue kind reported
        pattern: Evidence regex searched in normalized text
        severity_for: Layer -> Severity, or None when the rule does not
            apply to that layer
        description: Human-readable explanation
        evidence: Short label of the symbols the pattern looks for
        min_occurrences: Matches needed before the rule fires
    """

    issue: AbstractionIssue
    pattern: re.Pattern
    severity_for: Callable[[Layer], Optional[Severity]]
    description: str
    evidence: str
    min_occurrences: int = 1

    def check(self, source: SourceFile) -> Optional[AbstractionFinding]:
        severity = self.severity_for(source.layer)
        if severity is None:
            return None
        if self.min_occurrences == 1:
            matched = self.pattern.search(source.normalized_text) is not None
        else:
            count = sum(1 for _ in self.pattern.finditer(source.normalized_text))
            matched = count >= self.min_occurrences
        if not matched:
            return None
        return AbstractionFinding(
            file=source.relative_path,
            severity=severity,
            layer=source.layer,
            issue=self.issue,
            description=self.description,
            pattern=self.evidence,
        )


def _inner_or(other: Severity) -> Callable[[Layer], Optional[Severity]]:
    return lambda layer: Severity.CRITICAL if layer in _INNER_LAYERS else other


def _domain_only(severity: Severity) -> Callable[[Layer], Optional[Severity]]:
    return lambda layer: severity if layer is Layer.DOMAIN else None


ABSTRACTION_RULES: tuple[AbstractionRule, ...] = (
    AbstractionRule(
        issue=AbstractionIssue.SQL_MIXING,
        pattern=re.compile(
            r"\b(SqlConnection|SqlCommand|SqlDataReader|ExecuteReader|ExecuteNonQuery|ExecuteScalar)\b"
        ),
        severity_for=_inner_or(Severity.MEDIUM),
        description="Business logic mixed with SQL implementation details",
        evidence="SqlConnection, SqlCommand, etc.",
    ),
    AbstractionRule(
        issue=AbstractionIssue.EF_IN_DOMAIN,
        pattern=re.compile(r"\b(DbContext|DbSet|Include|ThenInclude|AsNoTracking)\b"),
        severity_for=_domain_only(Severity.CRITICAL),
        description="Domain layer contains Entity Framework details",
        evidence="DbContext, DbSet, Include, etc.",
    ),
    AbstractionRule(
        issue=AbstractionIssue.HTTP_MIXING,
        pattern=re.compile(r"\b(HttpClient|HttpRequest|HttpResponse|RestClient|WebClient)\b"),
        severity_for=_inner_or(Severity.LOW),
        description="Business logic mixed with HTTP communication details",
        evidence="HttpClient, HttpRequest, etc.",
    ),
    AbstractionRule(
        issue=AbstractionIssue.FILE_IO_MIXING,
        pattern=re.compile(r"\b(File\.(?:Read|Write)\w*|StreamReader|StreamWriter|FileStream)\b"),
        severity_for=lambda layer: Severity.HIGH if layer is Layer.DOMAIN else Severity.MEDIUM,
        description="Business logic mixed with file I/O operations",
        evidence="File.Read, StreamReader, etc.",
    ),
    AbstractionRule(
        issue=AbstractionIssue.SERIALIZATION_IN_DOMAIN,
        pattern=re.compile(r"\b(JsonSerializer|XmlSerializer|JsonConvert)\b"),
        severity_for=_domain_only(Severity.HIGH),
        description="Domain contains serialization logic",
        evidence="JsonSerializer, XmlSerializer, etc.",
    ),
    AbstractionRule(
        issue=AbstractionIssue.EXCESSIVE_LOGGING,
        pattern=re.compile(r"\b(ILogger|_logger\.Log\w*|Console\.WriteLine)\b"),
        severity_for=_domain_only(Severity.LOW),
        description="Excessive logging in domain logic",
        evidence="ILogger, Console.WriteLine (>5 occurrences)",
        min_occurrences=6,
    ),
)


def has_business_logic(text: str) -> bool:
    return bool(BUSINESS_NOUNS.search(text) or BUSINESS_VERBS.search(text))


def detect_mixed_abstractions(
    source: SourceFile, rules: Sequence[AbstractionRule] = ABSTRACTION_RULES
) -> list[AbstractionFinding]:
    """Run every rule against one file; files without business vocabulary are exempt."""
    if not has_business_logic(source.normalized_text):
        return []
    findings = []
    for rule in rules:
        finding = rule.check(source)
        if finding is not None:
            findings.append(finding)
    return findings


def extract_snippet(text: str, max_lines: int) -> str:
    return "\n".join(text.split("\n")[:max_lines])


def analyze_abstraction(
    files: Sequence[SourceFile],
    max_examples: int = 5,
    snippet_lines: int = 30,
    rules: Sequence[AbstractionRule] = ABSTRACTION_RULES,
) -> AbstractionResult:
    """Abstraction dimension over a whole scan."""
    findings: list[AbstractionFinding] = []
    examples: list[CodeExample] = []
    files_with_issues = 0

    for source in files:
        issues = detect_mixed_abstractions(source, rules)
        if not issues:
            continue
        findings.extend(issues)
        files_with_issues += 1
        if len(examples) < max_examples:
            examples.append(
                CodeExample(
                    file=source.relative_path,
                    path=source.path,
                    issues=tuple(f.issue for f in issues),
                    snippet=extract_snippet(source.normalized_text, snippet_lines),
                )
            )

    score = abstraction_score(len(findings), len(files))
    logger.debug(
        f"Abstraction: {len(findings)} issues in {files_with_issues}/{len(files)} files -> {score}"
    )
    return AbstractionResult(
        dimension=Dimension.ABSTRACTION,
        score=score,
        level=level_for(score),
        total=len(files),
        findings=tuple(findings),
        files_with_issues=files_with_issues,
        code_examples=tuple(examples),
    )

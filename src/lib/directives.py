"""
Directive implementations for beamdown

Colon-delimited directive lines (":author: Jane Doe") carry metadata that
has no Markdown equivalent. They are recognized before any other
classification and rendered straight to LaTeX, independent of frame state.
"""

from typing import Dict, List, Optional

from ..models.directives import DirectiveSpec, DIRECTIVE_PRIORITY
from ..models.lines import SpecialToken


class DirectiveRegistry:
    """
    Registry of directive specifications

    Maps SpecialTokens to DirectiveSpec objects and recognizes/renders
    directive lines.
    """

    def __init__(self) -> None:
        """Initialize the directive registry and register all built-in directives"""
        self.specs: Dict[SpecialToken, DirectiveSpec] = {}
        self.metadataDirectives_register()
        self.structuralDirectives_register()
        self.preambleDirectives_register()

    def register(self, spec: DirectiveSpec) -> None:
        """Register a directive specification"""
        self.specs[spec.token] = spec

    def spec_get(self, token: SpecialToken) -> Optional[DirectiveSpec]:
        """Get full directive specification by token"""
        return self.specs.get(token)

    def specs_listByPriority(self) -> List[DirectiveSpec]:
        """Registered specs in the order the recognizer tries them"""
        return [self.specs[token] for token in DIRECTIVE_PRIORITY if token in self.specs]

    def token_recognize(self, line: str) -> SpecialToken:
        """
        Classify a line as a directive

        Only lines starting with ':' qualify. The markers are then searched
        anywhere in the line, in priority order, and the first hit wins.

        Args:
            line: Input line, terminator included

        Returns:
            Matching SpecialToken, or SpecialToken.NONE if the line is not
            a directive

        Example:
            ":author: Jane Doe\\n" -> SpecialToken.AUTHOR
            ":unknown: thing\\n"   -> SpecialToken.NONE
            "Text :author: x\\n"   -> SpecialToken.NONE
        """
        if not line.startswith(':'):
            return SpecialToken.NONE

        for spec in self.specs_listByPriority():
            if spec.matches(line):
                return spec.token

        return SpecialToken.NONE

    def directive_render(self, token: SpecialToken, line: str) -> str:
        """
        Render a recognized directive line to LaTeX

        Args:
            token: Token returned by token_recognize() for this line
            line: The directive line

        Returns:
            LaTeX fragment, newline terminated

        Raises:
            ValueError: If the token has no registered directive
        """
        spec = self.spec_get(token)
        if spec is None:
            raise ValueError(f"No directive registered for token {token}")

        if not spec.takes_argument:
            return f"\\frame{{\\{spec.command}}}\n"

        argument = spec.argument_extract(line)

        if token == SpecialToken.DATE and 'today' in argument:
            return "\\date{\\today}\n"

        return f"\\{spec.command}{{{argument}}}\n"

    def metadataDirectives_register(self) -> None:
        """Register title-slide metadata and figure annotation directives"""

        metadata_specs = [
            (SpecialToken.AUTHOR, ':author:', 'author', 'Presentation author',
             [':author: Jane Doe']),
            (SpecialToken.DATE, ':date:', 'date', 'Presentation date ("today" uses \\today)',
             [':date: 1 April 2020', ':date: today']),
            (SpecialToken.CAPTION, ':caption:', 'caption', 'Caption for the open figure',
             [':caption: Results of the second run']),
            (SpecialToken.LABEL, ':label:', 'label', 'Label for cross-referencing',
             [':label: fig:results']),
        ]

        for token, marker, command, desc, examples in metadata_specs:
            self.register(DirectiveSpec(
                token=token,
                marker=marker,
                command=command,
                description=desc,
                examples=examples
            ))

    def structuralDirectives_register(self) -> None:
        """Register directives that produce whole slides"""

        self.register(DirectiveSpec(
            token=SpecialToken.TOC,
            marker=':toc:',
            command='tableofcontents',
            description='Table of contents slide',
            takes_argument=False,
            starts_document=True,
            examples=[':toc:']
        ))

        self.register(DirectiveSpec(
            token=SpecialToken.SECTION_PAGE,
            marker=':sectionpage:',
            command='sectionpage',
            description='Section title slide',
            takes_argument=False,
            starts_document=True,
            examples=[':sectionpage:']
        ))

    def preambleDirectives_register(self) -> None:
        """Register package and theme directives (meaningful in the preamble)"""

        preamble_specs = [
            (SpecialToken.PACKAGE, ':pkg:', 'usepackage', 'Load a LaTeX package',
             [':pkg: amsmath']),
            (SpecialToken.THEME, ':theme:', 'usetheme', 'Beamer presentation theme',
             [':theme: Madrid']),
            (SpecialToken.COLOR_THEME, ':colors:', 'usecolortheme', 'Beamer color theme',
             [':colors: beaver']),
            (SpecialToken.INNER_THEME, ':inner:', 'useinnertheme', 'Beamer inner theme',
             [':inner: circles']),
            (SpecialToken.OUTER_THEME, ':outer:', 'useoutertheme', 'Beamer outer theme',
             [':outer: infolines']),
        ]

        for token, marker, command, desc, examples in preamble_specs:
            self.register(DirectiveSpec(
                token=token,
                marker=marker,
                command=command,
                description=desc,
                examples=examples
            ))

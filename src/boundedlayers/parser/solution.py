"""Visual Studio solution (.sln) and MSBuild project parser."""

import logging
import posixpath
import re
from pathlib import Path
from xml.etree.ElementTree import ParseError

from defusedxml.ElementTree import parse as defused_parse

from boundedlayers.models.graph import Graph, Node

logger = logging.getLogger(__name__)

# Project("{type-guid}") = "Name", "Relative\Path.csproj", "{project-guid}"
PROJECT_LINE = re.compile(
    r'^\s*Project\("[^"]*"\)\s*=\s*"(?P<name>[^"]*)"\s*,\s*"(?P<path>[^"]*\.[A-Za-z]+proj)"\s*,'
)


def normalize_project_path(path: str) -> str:
    """Normalize a project path written with either separator to posix form."""
    return posixpath.normpath(path.strip().replace("\\", "/"))


class SolutionParser:
    """Parser turning a solution and its project files into a ``Graph``.

    Node ids are project paths relative to the solution directory, so
    project references (relative to the referencing project) resolve to the
    same ids.
    """

    @staticmethod
    def find_solution_file(directory: Path) -> Path | None:
        """Find a .sln file in the given directory.

        Args:
            directory: Directory to search

        Returns:
            Path to the first solution file in name order, None if there is none
        """
        candidates = sorted(p for p in directory.glob("*.sln") if p.is_file())
        if len(candidates) > 1:
            logger.warning(f"Multiple solution files in {directory}, using {candidates[0].name}")
        return candidates[0] if candidates else None

    @classmethod
    def parse_solution(cls, solution_file: Path) -> Graph:
        """Parse a solution file and every project it lists.

        Args:
            solution_file: Path to the .sln file

        Returns:
            Graph with one node per project, in solution order

        Raises:
            FileNotFoundError: If the solution file doesn't exist
            ValueError: If the solution or a project file can't be parsed
        """
        if not solution_file.exists():
            raise FileNotFoundError(f"Solution file not found: {solution_file}")

        try:
            lines = solution_file.read_text(encoding="utf-8-sig").splitlines()
        except UnicodeDecodeError as e:
            raise ValueError(f"Failed to read solution file {solution_file}: {e}")

        solution_dir = solution_file.parent
        nodes = []
        for line in lines:
            match = PROJECT_LINE.match(line)
            if not match:
                continue
            project_id = normalize_project_path(match.group("path"))
            references = cls.parse_project_references(solution_dir / project_id, project_id)
            nodes.append(Node(id=project_id, name=match.group("name").strip(), references=references))

        logger.info(f"Loaded {len(nodes)} projects from {solution_file}")

        try:
            return Graph(nodes)
        except ValueError as e:
            raise ValueError(f"Invalid solution {solution_file}: {e}")

    @staticmethod
    def parse_project_references(project_file: Path, project_id: str) -> list[str]:
        """Read ``ProjectReference`` items from an MSBuild project file.

        Args:
            project_file: Path to the project file on disk
            project_id: Solution-relative id of the project, used to resolve
                the relative ``Include`` paths

        Returns:
            Solution-relative ids of the referenced projects, in file order.
            Empty if the project file is missing.

        Raises:
            ValueError: If the project file is not well-formed XML
        """
        if not project_file.exists():
            logger.warning(f"Project file not found, assuming no references: {project_file}")
            return []

        try:
            root = defused_parse(project_file).getroot()
        except ParseError as e:
            raise ValueError(f"Invalid XML in project file {project_file}: {e}")

        project_dir = posixpath.dirname(project_id)
        references = []
        for element in root.iter():
            # tags carry the MSBuild namespace in pre-SDK project files
            if not isinstance(element.tag, str) or element.tag.rsplit("}", 1)[-1] != "ProjectReference":
                continue
            include = element.get("Include")
            if not include:
                continue
            references.append(normalize_project_path(posixpath.join(project_dir, include.replace("\\", "/"))))

        logger.debug(f"{project_id}: {len(references)} project references")
        return references

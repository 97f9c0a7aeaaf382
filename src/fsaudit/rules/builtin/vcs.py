"""Version-control rules — metadata directories of Git and Subversion checkouts."""

from fsaudit.classification.models import DirectoryClassification, VersionControlSystem
from fsaudit.rules.models import ClassificationRule

GIT_DIRECTORY = ClassificationRule(
    id="GIT_DIRECTORY",
    name="Git Metadata",
    description="The .git directory of a Git working tree.",
    classification=DirectoryClassification(VersionControlSystem.GIT),
    file_names=[".git"],
)

SVN_DIRECTORY = ClassificationRule(
    id="SVN_DIRECTORY",
    name="Subversion Metadata",
    description="The .svn directory of a Subversion working copy.",
    classification=DirectoryClassification(VersionControlSystem.SVN),
    file_names=[".svn"],
)

ALL_VCS_RULES = [GIT_DIRECTORY, SVN_DIRECTORY]

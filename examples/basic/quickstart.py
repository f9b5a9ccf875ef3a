#!/usr/bin/env python3
# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Azure DevOps TFVC Client SDK - Quickstart

Read-only tour of a TFVC repository:
- Connection check and project version control info
- Branch roots and recent changesets
- Item metadata and file content at a changeset
- Labels and shelvesets

Prerequisites:
- ``pip install -e .[identity]``
- Either set ``AZURE_DEVOPS_PAT`` to a personal access token with Code (Read) scope,
  or sign in interactively with Microsoft Entra ID.

Usage:
    python examples/basic/quickstart.py
"""

import os
import sys

from azure.core.credentials import AzureKeyCredential

from AzureDevOps.Tfvc.client import TfvcClient
from AzureDevOps.Tfvc.core.errors import HttpError, TfvcResourceNotFoundError
from AzureDevOps.Tfvc.models.request_data import (
    TfvcChangesetSearchCriteria,
    TfvcVersionDescriptor,
    TfvcVersionType,
    VersionControlRecursionType,
)


def get_collection_url() -> str:
    """Get the collection URL from the environment or user input."""
    url = os.environ.get("AZURE_DEVOPS_URL", "").strip()
    if url:
        return url
    if not sys.stdin.isatty():
        print("Set AZURE_DEVOPS_URL or run this script in a terminal.")
        sys.exit(1)
    return input("Enter your collection URL (e.g., https://dev.azure.com/fabrikam): ").strip()


def get_credential():
    pat = os.environ.get("AZURE_DEVOPS_PAT")
    if pat:
        return AzureKeyCredential(pat)
    from azure.identity import InteractiveBrowserCredential

    return InteractiveBrowserCredential()


def main() -> None:
    url = get_collection_url()
    project = os.environ.get("AZURE_DEVOPS_PROJECT") or input("Team project name: ").strip()

    with TfvcClient(url, get_credential()) as client:
        print("\nConnection")
        print("=" * 50)
        if not client.check_connection():
            print(f"Could not reach {url}")
            sys.exit(1)

        info = client.projects.get_info(project=project)
        print({"project": info.project_name, "tfvc": info.supports_tfvc, "git": info.supports_git})
        if not info.supports_tfvc:
            print("Project does not use TFVC; nothing more to show.")
            return

        print("\nBranches")
        print("=" * 50)
        for branch in client.branches.list(project, include_children=True):
            children = [c.path for c in branch.children or []]
            print({"path": branch.path, "children": children})

        print("\nRecent changesets")
        print("=" * 50)
        criteria = TfvcChangesetSearchCriteria(item_path=f"$/{project}")
        changesets = client.changesets.list(project, top=5, max_comment_length=80, search_criteria=criteria)
        for cs in changesets:
            author = cs.author.display_name if cs.author else None
            print({"id": cs.changeset_id, "author": author, "comment": cs.comment})

        print("\nItems")
        print("=" * 50)
        items = client.items.list(
            project,
            scope_path=f"$/{project}",
            recursion_level=VersionControlRecursionType.ONE_LEVEL,
        )
        files = [i for i in items if not i.is_folder]
        for item in items:
            print({"path": item.path, "folder": item.is_folder, "version": item.version})

        if files and changesets:
            descriptor = TfvcVersionDescriptor(
                version=str(changesets[0].changeset_id),
                version_type=TfvcVersionType.CHANGESET,
            )
            try:
                stream = client.items.get_content(files[0].path, project, version_descriptor=descriptor)
                try:
                    head = stream.read(200)
                finally:
                    stream.close()
                print({"path": files[0].path, "first_bytes": head})
            except TfvcResourceNotFoundError as e:
                print(f"{files[0].path} did not exist at changeset {descriptor.version}: {e.message}")

        print("\nLabels and shelvesets")
        print("=" * 50)
        try:
            for label in client.labels.list(project=project, top=5):
                print({"label": label.name, "scope": label.label_scope})
            for shelveset in client.shelvesets.list(top=5):
                print({"shelveset": shelveset.name, "owner": shelveset.owner.display_name if shelveset.owner else None})
        except HttpError as e:
            print(f"Request failed ({e.status_code}): {e.message}")


if __name__ == "__main__":
    main()

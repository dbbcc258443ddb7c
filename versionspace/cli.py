#!/usr/bin/env python3
"""versionspace CLI entrypoint."""

import sys
import argparse
import logging
from pathlib import Path

from versionspace.git import RepositoryFacade
from versionspace.lib.config import ConfigError, load_git_config
from versionspace.lib.output import error
from versionspace.commands import branch as cmd_branch_module
from versionspace.commands import changes as cmd_changes_module
from versionspace.commands import diff as cmd_diff_module
from versionspace.commands import info as cmd_info_module
from versionspace.commands import log as cmd_log_module
from versionspace.commands import remote as cmd_remote_module
from versionspace.commands import stash as cmd_stash_module
from versionspace.commands import status as cmd_status_module


def build_repository(args) -> RepositoryFacade:
    """Create the facade for -C (or the current directory) with its config."""
    directory = Path(args.directory) if args.directory else Path.cwd()
    config = load_git_config(directory)
    return RepositoryFacade(directory, config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='vs', description='Git repository command line')
    parser.add_argument('-C', dest='directory', help='Run as if started in this directory')
    parser.add_argument('--verbose', '-v', action='store_true', help='Log git invocations')
    parser.add_argument('--no-color', action='store_true', help='Disable colored output')
    subparsers = parser.add_subparsers(dest='command', required=True)

    # vs status
    p_status = subparsers.add_parser('status', help='Show staged, modified and untracked files')
    p_status.set_defaults(func=cmd_status_module.cmd_status)

    # vs add
    p_add = subparsers.add_parser('add', help='Stage a file')
    p_add.add_argument('file', nargs='?', help='File to stage')
    p_add.add_argument('--all', '-A', action='store_true', help='Stage everything')
    p_add.set_defaults(func=cmd_changes_module.cmd_add)

    # vs commit
    p_commit = subparsers.add_parser('commit', help='Commit staged changes')
    p_commit.add_argument('message', help='Commit message')
    p_commit.set_defaults(func=cmd_changes_module.cmd_commit)

    # vs unstage
    p_unstage = subparsers.add_parser('unstage', help='Remove a file from the index')
    p_unstage.add_argument('file', help='File to unstage')
    p_unstage.set_defaults(func=cmd_changes_module.cmd_unstage)

    # vs discard
    p_discard = subparsers.add_parser('discard', help='Discard unstaged changes to a file')
    p_discard.add_argument('file', help='File to restore')
    p_discard.set_defaults(func=cmd_changes_module.cmd_discard)

    # vs init
    p_init = subparsers.add_parser('init', help='Initialize a repository')
    p_init.set_defaults(func=cmd_changes_module.cmd_init)

    # vs branch
    p_branch = subparsers.add_parser('branch', help='List branches')
    p_branch.set_defaults(func=cmd_branch_module.cmd_branch_list)
    branch_sub = p_branch.add_subparsers(dest='branch_cmd')

    # vs branch list
    p_branch_list = branch_sub.add_parser('list', help='List branches')
    p_branch_list.set_defaults(func=cmd_branch_module.cmd_branch_list)

    # vs branch create
    p_branch_create = branch_sub.add_parser('create', help='Create a branch and switch to it')
    p_branch_create.add_argument('name', help='Branch name')
    p_branch_create.set_defaults(func=cmd_branch_module.cmd_branch_create)

    # vs branch delete
    p_branch_delete = branch_sub.add_parser('delete', help='Delete a branch')
    p_branch_delete.add_argument('name', help='Branch name')
    p_branch_delete.add_argument('--force', '-f', action='store_true', help='Delete even if unmerged')
    p_branch_delete.set_defaults(func=cmd_branch_module.cmd_branch_delete)

    # vs checkout
    p_checkout = subparsers.add_parser('checkout', help='Switch branch')
    p_checkout.add_argument('branch', help='Branch name')
    p_checkout.set_defaults(func=cmd_branch_module.cmd_checkout)

    # vs merge
    p_merge = subparsers.add_parser('merge', help='Merge a branch into the current branch')
    p_merge.add_argument('branch', help='Branch to merge')
    p_merge.set_defaults(func=cmd_branch_module.cmd_merge)

    # vs rebase
    p_rebase = subparsers.add_parser('rebase', help='Rebase the current branch')
    p_rebase.add_argument('branch', help='Branch to rebase onto')
    p_rebase.set_defaults(func=cmd_branch_module.cmd_rebase)

    # vs log
    p_log = subparsers.add_parser('log', help='Show recent commits')
    p_log.add_argument('limit', nargs='?', type=int, help='Number of commits (default from config)')
    p_log.set_defaults(func=cmd_log_module.cmd_log)

    # vs diff
    p_diff = subparsers.add_parser('diff', help='Show changes')
    p_diff.add_argument('targets', nargs='*', help='A file, or two commits')
    p_diff.add_argument('--staged', action='store_true', help='Show staged changes')
    p_diff.set_defaults(func=cmd_diff_module.cmd_diff)

    # vs push
    p_push = subparsers.add_parser('push', help='Push to origin')
    p_push.add_argument('remote', nargs='?', help='Remote (origin only)')
    p_push.add_argument('branch', nargs='?', help='Branch to push')
    p_push.set_defaults(func=cmd_remote_module.cmd_push)

    # vs pull
    p_pull = subparsers.add_parser('pull', help='Pull from a remote')
    p_pull.add_argument('remote', nargs='?', help='Remote name')
    p_pull.add_argument('branch', nargs='?', help='Branch name')
    p_pull.set_defaults(func=cmd_remote_module.cmd_pull)

    # vs fetch
    p_fetch = subparsers.add_parser('fetch', help='Fetch from a remote')
    p_fetch.add_argument('remote', nargs='?', help='Remote name')
    p_fetch.set_defaults(func=cmd_remote_module.cmd_fetch)

    # vs remote
    p_remote = subparsers.add_parser('remote', help='List remotes')
    p_remote.set_defaults(func=cmd_remote_module.cmd_remote_list)
    remote_sub = p_remote.add_subparsers(dest='remote_cmd')

    # vs remote list
    p_remote_list = remote_sub.add_parser('list', help='List remotes')
    p_remote_list.set_defaults(func=cmd_remote_module.cmd_remote_list)

    # vs remote add
    p_remote_add = remote_sub.add_parser('add', help='Add a remote')
    p_remote_add.add_argument('name', help='Remote name')
    p_remote_add.add_argument('url', help='Remote URL')
    p_remote_add.set_defaults(func=cmd_remote_module.cmd_remote_add)

    # vs remote remove
    p_remote_remove = remote_sub.add_parser('remove', help='Remove a remote')
    p_remote_remove.add_argument('name', help='Remote name')
    p_remote_remove.set_defaults(func=cmd_remote_module.cmd_remote_remove)

    # vs remote get-url
    p_remote_url = remote_sub.add_parser('get-url', help='Show a remote URL')
    p_remote_url.add_argument('name', nargs='?', default='origin', help='Remote name (default: origin)')
    p_remote_url.set_defaults(func=cmd_remote_module.cmd_remote_get_url)

    # vs stash
    p_stash = subparsers.add_parser('stash', help='Manage stashes')
    stash_sub = p_stash.add_subparsers(dest='stash_cmd', required=True)

    # vs stash save
    p_stash_save = stash_sub.add_parser('save', help='Stash uncommitted changes')
    p_stash_save.add_argument('message', nargs='?', help='Stash message')
    p_stash_save.set_defaults(func=cmd_stash_module.cmd_stash_save)

    # vs stash pop
    p_stash_pop = stash_sub.add_parser('pop', help='Apply and drop the latest stash')
    p_stash_pop.set_defaults(func=cmd_stash_module.cmd_stash_pop)

    # vs stash list
    p_stash_list = stash_sub.add_parser('list', help='List stashes')
    p_stash_list.set_defaults(func=cmd_stash_module.cmd_stash_list)

    # vs stash apply
    p_stash_apply = stash_sub.add_parser('apply', help='Apply a stash')
    p_stash_apply.add_argument('id', help='Stash id (e.g., stash@{0})')
    p_stash_apply.set_defaults(func=cmd_stash_module.cmd_stash_apply)

    # vs stash drop
    p_stash_drop = stash_sub.add_parser('drop', help='Drop a stash')
    p_stash_drop.add_argument('id', help='Stash id (e.g., stash@{0})')
    p_stash_drop.set_defaults(func=cmd_stash_module.cmd_stash_drop)

    # vs root
    p_root = subparsers.add_parser('root', help='Show repository top-level directory')
    p_root.set_defaults(func=cmd_info_module.cmd_root)

    # vs head
    p_head = subparsers.add_parser('head', help='Show current commit hash')
    p_head.add_argument('--short', action='store_true', help='Abbreviated hash')
    p_head.set_defaults(func=cmd_info_module.cmd_head)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        repo = build_repository(args)
    except (ConfigError, ValueError) as e:
        error(f"Invalid configuration: {e}")
        return 2

    return args.func(args, repo)


if __name__ == '__main__':
    sys.exit(main())

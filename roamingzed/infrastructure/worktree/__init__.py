from .providers import static_worktree, cwd_worktree

__all__ = ["static_worktree", "cwd_worktree"]

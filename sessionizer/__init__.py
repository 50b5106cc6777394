"""Pick a project directory with fzf and open it in a tmux session."""

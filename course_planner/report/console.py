from rich.console import Console

# one course per line, printed exactly as stored
console = Console(soft_wrap=True, emoji=False, highlight=False)

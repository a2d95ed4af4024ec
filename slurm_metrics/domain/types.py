"""Domain types and aliases."""

from datetime import datetime

Timestamp = datetime

# Series identity: label name -> label value
Labels = dict[str, str]

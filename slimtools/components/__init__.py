"""Readers that each produce one piece of the status line, or None."""
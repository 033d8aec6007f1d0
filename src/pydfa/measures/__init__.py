"""numpy views and batch evaluation over built automata."""

"""Cut algorithms: bounded max flow, closure, branching search, brute force."""

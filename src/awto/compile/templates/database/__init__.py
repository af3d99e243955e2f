"""Templates of the generated ``database`` package."""

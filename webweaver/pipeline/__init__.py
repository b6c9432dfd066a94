"""
Pipeline stages.

    layout      → category lineage, output paths, run configuration
    discover    → list content files, parse metadata
    materialize → write the output tree
    index       → group by year, render the index
    feed        → assemble and serialize the RSS channel
    build       → run all stages
    cli         → `weave` commands
"""

"""leetup-engine — solution file generation and extraction for leetup.

Generates solution files from fetched problem stubs, embeds ``@leetup=``
marker comments so the submittable code region can be recovered later,
and runs per-language pick hooks around the generated file.
"""

__version__ = "0.3.0"

"""Flutter Bunny -- configuration-driven Flutter project scaffolding.

Quick usage::

    from bunny.config import ProjectConfig
    from bunny.scaffolder import ProjectGenerator

    config = ProjectConfig(
        project_name="demo_app",
        architecture="MVVM",
        state_management="Provider",
        modules=["Theme Manager", "Localization"],
    )
    project_path = await ProjectGenerator(config).generate("/tmp/output")
"""

__version__ = "0.3.0"

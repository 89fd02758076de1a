"""Maven pom.xml generation for projects built with other tools."""

from .cli import main, pom, write_pom_properties
from .pom_builder import build_model, ProjectDescriptionError
from .pom_models import ProjectDescription, DescriptorModel, ScmRecord
from .pom_writer import render_descriptor, render_properties

__all__ = [
    "main", "pom", "write_pom_properties", "build_model", "ProjectDescriptionError",
    "ProjectDescription", "DescriptorModel", "ScmRecord", "render_descriptor", "render_properties",
]

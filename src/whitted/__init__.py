"""Whitted-style recursive ray tracer.

This package renders scenes made of spheres and planes lit by a single point
light, with support for:
- Affine transforms on shapes and procedural patterns
- Phong shading with hard shadows
- Recursive reflection and refraction with nested transparent solids
- Canvas output to PPM and PNG

Subpackages:
    core: Homogeneous tuples, 4x4 matrices, transform builders and rays
    geometry: The shape abstraction and its primitives (sphere, plane)
    materials: Colors, patterns, lights and the Phong material model
    scene: Intersection records, shading computations and the world
    camera: Pinhole camera with ray generation and the render loop
    preview: Pixel canvas and image export
"""

__version__ = "0.1.0"

import setuptools

setuptools.setup(
    name = 'landmarkcurve',
    version = '1.0',
    description = 'smooth curves and tube meshes through 3D landmark points',
    packages = setuptools.find_packages(exclude=['tests']),
    install_requires=['numpy', 'scipy', 'pyvista'],
    extras_require={'test': ['pytest']},
)

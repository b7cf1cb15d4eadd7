import setuptools

with open("README.md", "r", encoding = "utf-8") as fh:
	long_description = fh.read()

setuptools.setup(
	name = "morphsynth",
	version = "v0.1.0",
	description = "Morphological word form synthesis over finite-state dictionaries",
	long_description = long_description,
	long_description_content_type = "text/markdown",
	classifiers = [
		"Programming Language :: Python :: 3",
		"License :: OSI Approved :: Apache Software License",
		"Operating System :: OS Independent",
	],
	package_dir = {"": "src"},
	packages = setuptools.find_packages(where="src"),
	package_data = {"morphsynth": ["data/*/*"]},
	python_requires = ">=3.8",
	install_requires = [
		"pyfoma", "graphviz", "tqdm"
	],
	extras_require = {
		"test": ["pytest"],
	},
	entry_points = {
		"console_scripts": ["morphsynth = morphsynth.__main__:main"],
	},
)

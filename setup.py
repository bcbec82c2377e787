from setuptools import setup, find_packages

setup(
   name="docstore",
   version="0.1",
   description="Single-collection CRUD over a MongoDB-compatible document database",
   package_dir={"": "src"},
   packages=find_packages(where="src"),
   include_package_data=True,
   python_requires=">=3.10",
   install_requires=[
      "pymongo>=4.0",
      "pydantic>=2.0",
   ],
   extras_require={
      "test": ["pytest", "pytest-mock"],
   },
   entry_points={
      "console_scripts": ["docstore-demo=docstore.main:main"],
   },
)

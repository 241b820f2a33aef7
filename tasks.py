from invoke import task


@task
def clean(c):
    c.run("rm -rf dist/", echo=True)
    c.run("rm -rf pychain.egg-info/", echo=True)
    c.run("find . -name '*.pyc' -delete", echo=True)
    c.run("find . -name '__pycache__' -delete", echo=True)
    c.run("rm -f .coverage", echo=True)


@task(pre=[clean])
def build(c):
    c.run("pip install -e .[test]", echo=True)


@task(pre=[clean])
def test(c):
    c.run("py.test tests", echo=True)

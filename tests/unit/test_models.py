"""Tests for the plain test entity models."""

from suitesmith import models
from suitesmith.codegen import Printer
from suitesmith.models import AllFilesPresentMethodModel, RunTestMethodModel, SimpleTestClassModel

from tests.fixtures.models import leaf_class, run_test


class TestRunTestMethodModel:

    def test_signature_and_body(self):
        method = RunTestMethodModel("testA", "testData/foo/a.kt", data_string="a.kt")
        p = Printer()
        method.generate_signature(p)
        p.println()
        method.generate_body(p)
        assert p.getvalue() == (
            "public void testA() throws Exception\n"
            'runTest("testData/foo/a.kt");\n'
        )

    def test_skip_disables_generation(self):
        assert RunTestMethodModel("testA", "a.kt").should_be_generated()
        assert not RunTestMethodModel("testA", "a.kt", skip=True).should_be_generated()

    def test_body_escapes_test_data_file(self):
        method = RunTestMethodModel("testQuote", 'testData\\foo\\"quoted".kt')
        p = Printer()
        method.generate_body(p)
        assert p.getvalue() == 'runTest("testData/foo/\\"quoted\\".kt");\n'

    def test_satisfies_protocol(self):
        assert isinstance(run_test("A"), models.MethodModel)


class TestAllFilesPresentMethodModel:

    def test_name_derived_from_class(self):
        method = AllFilesPresentMethodModel("Foo", "testData/foo", r"^(.+)\.kt$")
        assert method.name == "testAllFilesPresentInFoo"
        assert method.data_string is None
        assert method.should_be_generated()

    def test_body(self):
        method = AllFilesPresentMethodModel(
            "Foo", "testData/foo", r"^(.+)\.kt$", target_backend="JVM", recursive=False
        )
        p = Printer()
        method.generate_body(p)
        assert p.getvalue() == (
            "KotlinTestUtils.assertAllTestsPresentByMetadata(this.getClass(), "
            'new File("testData/foo"), Pattern.compile("^(.+)\\\\.kt$"), '
            "TargetBackend.JVM, false);\n"
        )

    def test_body_escapes_literals(self):
        method = AllFilesPresentMethodModel("Foo", 'testData\\say "hi"', '^\\w+"\\.kt$')
        p = Printer()
        method.generate_body(p)
        assert (
            'new File("testData/say \\"hi\\""), '
            'Pattern.compile("^\\\\w+\\"\\\\.kt$"), '
        ) in p.getvalue()


class TestSimpleTestClassModel:

    def test_class_with_generated_method_is_not_empty(self):
        assert not leaf_class("Foo", "A").is_empty()

    def test_class_without_methods_is_empty(self):
        assert SimpleTestClassModel(name="Foo").is_empty()

    def test_only_skipped_methods_is_empty(self):
        cls = SimpleTestClassModel(name="Foo", methods=[run_test("A", skip=True)])
        assert cls.is_empty()

    def test_emptiness_looks_into_children(self):
        empty_child = SimpleTestClassModel(name="Child")
        full_child = leaf_class("Child", "A")
        assert SimpleTestClassModel(name="Foo", inner_test_classes=[empty_child]).is_empty()
        assert not SimpleTestClassModel(name="Foo", inner_test_classes=[empty_child, full_child]).is_empty()

    def test_sequences_are_frozen_to_tuples(self):
        cls = SimpleTestClassModel(name="Foo", methods=[run_test("A")])
        assert isinstance(cls.methods, tuple)
        assert isinstance(cls, models.TestClassModel)

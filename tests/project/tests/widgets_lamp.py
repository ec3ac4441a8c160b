from tests.views import GreetingMixin, WidgetsView


def fixtures(lamp):
    @lamp.fixture(controller=WidgetsView)
    def card(ctx):
        ctx.render(partial="card", context={"widget": "Lamp"})

    @lamp.fixture(name="widgets/empty", controller=WidgetsView)
    def empty(ctx):
        ctx.view.widgets = []
        ctx.render("widgets/index")

    with lamp.define(controller=WidgetsView) as widgets:
        widgets.register_fixture(lambda ctx: ctx.render("widgets/index"))
        widgets.register_fixture(lambda ctx: ctx.render(template="widgets/special"))

    lamp.register_fixture(
        lambda ctx: ctx.render(partial="application/footer"),
        extend=[GreetingMixin],
    )

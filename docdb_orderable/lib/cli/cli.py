import logging

import click
from click_option_group import optgroup, MutuallyExclusiveOptionGroup

from docdb_orderable.lib.aws.docdb import DocDBOrderableException, get_docdb_client, get_orderable_db_instance
from docdb_orderable.lib.aws.docdb.types import DEFAULT_ENGINE, DEFAULT_LICENSE_MODEL


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s %(threadName)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!")


@cli.command()
@optgroup.group(
    "Instance class",
    cls=MutuallyExclusiveOptionGroup,
    help="The manner of choosing the instance class",
)
@optgroup.option("--instance-class", help="Exact DB instance class")
@optgroup.option(
    "--preferred-instance-class",
    "preferred_instance_classes",
    multiple=True,
    help="Preferred DB instance class, repeat in order of preference",
)
@optgroup.group(
    "Engine version",
    cls=MutuallyExclusiveOptionGroup,
    help="The manner of choosing the engine version",
)
@optgroup.option("--engine-version", help="Exact engine version")
@optgroup.option("--default-only", is_flag=True, default=False, help="Use the engine's default version")
@click.option("--engine", default=DEFAULT_ENGINE, show_default=True, help="DB engine")
@click.option("--license-model", default=DEFAULT_LICENSE_MODEL, show_default=True, help="License model")
@click.option("--vpc/--no-vpc", default=None, help="Filter on VPC capability, no filter when omitted")
@click.option("--region", help="AWS region, defaults to the AWS environment")
def lookup(
    instance_class,
    preferred_instance_classes,
    engine_version,
    default_only,
    engine,
    license_model,
    vpc,
    region,
):
    try:
        result = get_orderable_db_instance(
            instance_class=instance_class,
            preferred_instance_classes=list(preferred_instance_classes),
            engine=engine,
            engine_version=engine_version,
            default_only=default_only,
            license_model=license_model,
            vpc=vpc,
            client=get_docdb_client(region),
        )
    except DocDBOrderableException as e:
        raise click.ClickException(str(e)) from e

    click.echo()

    echo_key_value("Instance Class", result.instance_class)
    echo_key_value("Engine", result.engine)
    echo_key_value("Engine Version", result.engine_version)
    echo_key_value("License Model", result.license_model)
    echo_key_value("VPC", result.vpc)
    echo_key_value("Availability Zones", ", ".join(result.availability_zones))


def run():
    exit(cli())


if __name__ == "__main__":
    run()

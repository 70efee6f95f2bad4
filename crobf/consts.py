# Place any global site data in this module.
# Templates receive it through crobf.utils.team.init_app.
from dataclasses import dataclass
from types import MappingProxyType

SITE_TITLE = 'CROBF'
SITE_DESCRIPTION = 'Empresa de desarrollo de software'

FOUNDERS_PREFIX = '/founders/'


@dataclass(frozen=True)
class TeamMember:
    """
    Public profile data for one person shown on the site.

    Empty strings mean the value is absent (no photo, no LinkedIn profile).
    """
    full_name: str
    email: str
    github: str
    link: str
    logo: str = ''
    linkedin: str = ''

    @property
    def has_logo(self) -> bool:
        return bool(self.logo)

    @property
    def has_linkedin(self) -> bool:
        return bool(self.linkedin)

    def to_dict(self) -> dict:
        # Keys follow the names used by the templates
        return {
            'fullName': self.full_name,
            'logo': self.logo,
            'email': self.email,
            'gitHub': self.github,
            'linkedin': self.linkedin,
            'link': self.link
        }


TEAM_MEMBERS = MappingProxyType({
    'Juan': TeamMember(
        full_name='Beresiarte Juan Basiluk',
        logo='/founders/juan_beresiarte.jpeg',
        email='juanberesiarte@gmail.com',
        github='https://github.com/beresiartejuan',
        linkedin='https://www.linkedin.com/in/beresiartejuan/',
        link='/founders/juan_beresiarte'
    ),
    'Ezequiel': TeamMember(
        full_name='Casiano Ezequiel',
        email='ezequielcasiano15@gmail.com',
        github='https://github.com/yoezequiel',
        linkedin='https://www.linkedin.com/in/yoezequiel/',
        link='/founders/ezequiel_casiano'
    ),
    'Lautaro': TeamMember(
        full_name='Ferreira Lautaro',
        email='Lauferreyraff@gmail.com',
        github='https://github.com/lautaroff',
        link='/founders/lautaro_ferreira'
    ),
    'Valentina': TeamMember(
        full_name='Osorio Valentina',
        email='valentina.osorio2203@gmail.com',
        github='https://github.com/Valen2203',
        link='/founders/valentina_osorio'
    ),
    'Magali': TeamMember(
        full_name='Rodriguez Magali',
        email='magalidaianarodriguezm@gmail.com',
        github='https://github.com/Magali22R',
        link='/founders/magali_rodriguez'
    ),
})

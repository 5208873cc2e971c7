import pytest

from sections.models import Section

pytestmark = pytest.mark.django_db


def test_create_and_list_sections(api_client, grade):
    response = api_client.post('/api/sections', {'grade': grade.id, 'name': 'A'}, format='json')

    assert response.status_code == 201
    assert response.data['grade_name'] == 'Grade 3'
    assert response.data['is_active'] is True

    response = api_client.get('/api/sections')
    assert response.status_code == 200
    assert [s['name'] for s in response.data] == ['A']


def test_grade_is_required(api_client, db):
    response = api_client.post('/api/sections', {'name': 'A'}, format='json')

    assert response.status_code == 400
    assert 'grade' in response.data


def test_section_name_unique_within_grade(api_client, grade, other_grade):
    Section.objects.create(grade=grade, name='A')

    duplicate = api_client.post('/api/sections', {'grade': grade.id, 'name': 'A'}, format='json')
    same_name_other_grade = api_client.post('/api/sections', {'grade': other_grade.id, 'name': 'A'}, format='json')

    assert duplicate.status_code == 400
    assert same_name_other_grade.status_code == 201


def test_update_section(api_client, grade):
    section = Section.objects.create(grade=grade, name='A')

    response = api_client.put(
        f'/api/sections/{section.id}',
        {'grade': grade.id, 'name': 'Mabini', 'description': 'Morning shift'},
        format='json',
    )

    assert response.status_code == 200
    section.refresh_from_db()
    assert section.name == 'Mabini'
    assert section.description == 'Morning shift'


def test_delete_section(api_client, grade):
    section = Section.objects.create(grade=grade, name='A')

    response = api_client.delete(f'/api/sections/{section.id}')

    assert response.status_code == 204
    assert not Section.objects.filter(pk=section.id).exists()


@pytest.mark.parametrize('section_id', ['9999', 'abc'])
def test_unknown_section_is_404(api_client, db, section_id):
    assert api_client.get(f'/api/sections/{section_id}').status_code == 404


def test_filter_by_grade_and_search(api_client, grade, other_grade):
    Section.objects.create(grade=grade, name='Rizal')
    Section.objects.create(grade=grade, name='Luna')
    Section.objects.create(grade=other_grade, name='Rizal')

    by_grade = api_client.get('/api/sections', {'grade': grade.id})
    by_name = api_client.get('/api/sections', {'search': 'riz'})

    assert sorted(s['name'] for s in by_grade.data) == ['Luna', 'Rizal']
    assert [s['grade'] for s in by_name.data] == [grade.id, other_grade.id]
